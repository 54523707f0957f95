import os
from dataclasses import dataclass

ENV_PREFIX = "BUDGETCALC_"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    title: str = "BudgetCalc"
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Read BUDGETCALC_* variables (TITLE, LOG_LEVEL, HOST, PORT), falling back to defaults."""
        environ = os.environ if environ is None else environ
        values = {}
        for key, value in environ.items():
            if key.startswith(ENV_PREFIX) and value:
                name = key[len(ENV_PREFIX):].lower()
                if name in cls.__dataclass_fields__:
                    values[name] = value
        if "log_level" in values:
            level = values["log_level"].upper()
            if level not in LOG_LEVELS:
                raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {values['log_level']!r}")
            values["log_level"] = level
        if "port" in values:
            try:
                values["port"] = int(values["port"])
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}PORT must be an integer, got {values['port']!r}") from None
        return cls(**values)
