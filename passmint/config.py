"""PassMint runtime settings, read from ``PASSMINT_*`` environment variables."""

import os


def _number(env, name: str, default, cast):
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Config:
    """Runtime settings.

    Raises :class:`ValueError` naming the variable when a numeric setting
    cannot be parsed.
    """

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        # Metadata sinks; either, both or neither may be set
        self.log_url = env.get("PASSMINT_LOG_URL") or None
        self.log_file = env.get("PASSMINT_LOG_FILE") or None
        self.log_timeout = _number(env, "PASSMINT_LOG_TIMEOUT", 10.0, float)

        self.default_length = _number(env, "PASSMINT_DEFAULT_LENGTH", 16, int)

    @property
    def logging_enabled(self) -> bool:
        return bool(self.log_url or self.log_file)
