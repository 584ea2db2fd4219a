"""Credentials command - store encrypted credentials in the config file."""

import logging

import click

from ... import credentials as crypto
from ...config import stored_auth, update_auth
from ...context import pass_context
from ...errors import ConfigError, CredentialsError, SpaceTrackError
from ..helpers import fail, load_secret

logger = logging.getLogger(__name__)


def _checked(check):
    def value_proc(value):
        try:
            check(value)
        except CredentialsError as e:
            raise click.BadParameter(str(e)) from e
        return value

    return value_proc


def _in_clear(ctx, name, value, stored):
    # Values read back from the config file are encrypted when a secret file is set
    if not value or not ctx.config.secret_file or value != stored.get(name):
        return value
    try:
        load_secret(ctx)
        key = ctx.config.auth.secret.encode("utf-8")
        return crypto.decrypt(value.encode("utf-8"), key).decode("utf-8")
    except ConfigError as e:
        fail(f"stored {name} is encrypted and can not be read back ({e}): use --{name}")
    except (CredentialsError, UnicodeDecodeError):
        fail(f"stored {name} does not decrypt with the secret file: use --{name}")


@click.command()
@click.option(
    "--passphrase",
    default=None,
    help="32 character passphrase used to encrypt; prompted for when missing",
)
@click.option(
    "--auto-passphrase",
    is_flag=True,
    help="Generate the passphrase and print it (or write it to --secret-file)",
)
@pass_context
def credentials(ctx, passphrase, auto_passphrase):
    """Encrypt identity and password into the config file.

    The identity comes from --identity, $SPACETRACK_IDENTITY or the config
    file. The password and the passphrase are prompted for, hidden, when
    they are not given.

    When a secret file is configured, values stored by an earlier run are
    decrypted with it first, so a second run only changes the passphrase.

    Examples:
        spacetrack --identity me@example.com credentials --auto-passphrase
        spacetrack --secret-file ~/.spacetrack.key --identity me@example.com credentials
    """
    config = ctx.config
    if not config.auth.identity:
        fail("identity is required: use --identity or set auth.identity in the config file")

    stored = stored_auth(ctx.config_path)
    identity = _in_clear(ctx, "identity", config.auth.identity, stored)
    password = _in_clear(ctx, "password", config.auth.password, stored)
    if password:
        try:
            crypto.check_password(password)
        except CredentialsError as e:
            raise click.BadParameter(str(e), param_hint="'--password'") from e
    else:
        password = click.prompt(
            "Password", hide_input=True, value_proc=_checked(crypto.check_password)
        )

    if passphrase:
        try:
            crypto.check_passphrase(passphrase)
        except CredentialsError as e:
            raise click.BadParameter(str(e), param_hint="'--passphrase'") from e
    elif auto_passphrase:
        logger.info("generating a passphrase on demand")
        passphrase = crypto.generate_passphrase()
    else:
        passphrase = click.prompt(
            "Passphrase",
            hide_input=True,
            value_proc=_checked(crypto.check_passphrase),
        )

    key = passphrase.encode("utf-8")
    try:
        values = {
            "identity": crypto.encrypt(identity.encode("utf-8"), key).decode("ascii"),
            "password": crypto.encrypt(password.encode("utf-8"), key).decode("ascii"),
        }
        update_auth(ctx.config_path, values, create=True)
        if config.secret_file:
            crypto.write_passphrase_file(config.secret_file, passphrase)
            logger.info("passphrase persisted into the secret file %s", config.secret_file)
    except (SpaceTrackError, OSError) as e:
        fail(str(e))

    click.echo(f"Encrypted credentials written to {ctx.config_path}")
    if config.secret_file:
        click.echo(f"Passphrase written to {config.secret_file}")
    elif auto_passphrase:
        click.echo(f"Passphrase: {passphrase}")
