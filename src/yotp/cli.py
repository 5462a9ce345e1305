import logging
import time
from typing import Optional, Sequence

import click

from .encoding import SecretFormat, decode_secret, guess_format
from .errors import OTPError
from .totp import DEFAULT_EPOCH, DEFAULT_TIME_STEP, timecode, totp

logger = logging.getLogger(__name__)

FORMAT_CHOICES = ["auto"] + [fmt.value for fmt in SecretFormat]


def code_for_secret(
    secret: str,
    fmt: str,
    current_time: int,
    epoch: int = DEFAULT_EPOCH,
    time_step: int = DEFAULT_TIME_STEP,
    digits: int = 6,
) -> str:
    """
    Decodes one command line secret and returns its TOTP code.

    :param fmt: "auto", "hex" or "base32"; "auto" guesses from the characters used
    """
    secret_format = guess_format(secret) if fmt == "auto" else SecretFormat(fmt)
    key = decode_secret(secret, secret_format)
    logger.debug(
        "%s secret, %d key bytes, counter %d",
        secret_format.value,
        len(key),
        timecode(current_time, epoch, time_step),
    )
    return totp(key, current_time, epoch=epoch, time_step=time_step, digits=digits)


@click.command(context_settings={"auto_envvar_prefix": "YOTP"})
@click.argument("secrets", nargs=-1)
@click.option(
    "--format",
    "fmt",
    envvar="YOTP_FORMAT",
    type=click.Choice(FORMAT_CHOICES, case_sensitive=False),
    default="auto",
    show_default=True,
    help="Encoding of the secrets.",
)
@click.option("--digits", type=click.IntRange(1, 9), default=6, show_default=True, help="Length of each code.")
@click.option(
    "--time-step",
    type=click.IntRange(min=1),
    default=DEFAULT_TIME_STEP,
    show_default=True,
    help="Seconds each code stays valid.",
)
@click.option("--epoch", type=int, default=DEFAULT_EPOCH, show_default=True, help="Unix time steps are counted from.")
@click.option(
    "--at",
    "at_time",
    envvar="YOTP_AT",
    type=int,
    default=None,
    help="Unix time to compute codes for [default: now].",
)
@click.option("--echo-secret", is_flag=True, help="Print each secret after its code.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(
    ctx: click.Context,
    secrets: Sequence[str],
    fmt: str,
    digits: int,
    time_step: int,
    epoch: int,
    at_time: Optional[int],
    echo_secret: bool,
    verbose: bool,
) -> None:
    """Print the current TOTP code for each SECRET (hex or Base32)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if not secrets:
        click.echo(ctx.get_usage())
        ctx.exit(1)

    current_time = int(time.time()) if at_time is None else at_time
    for secret in secrets:
        try:
            code = code_for_secret(secret, fmt.lower(), current_time, epoch=epoch, time_step=time_step, digits=digits)
        except OTPError as e:
            logger.warning("skipping secret: %s", e)
            click.echo("I don't know what to do with this secret: {}".format(secret), err=True)
            continue
        click.echo("{} {}".format(code, secret) if echo_secret else code)


if __name__ == "__main__":
    main()
