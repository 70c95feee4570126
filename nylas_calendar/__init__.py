import os
import tomllib
from pathlib import Path

ENV_PREFIX = "NYLAS_"


class Configurator:
    """Loads a dict of config from TOML file(s) and behaves like an object, ie config.VALUE"""

    configuration = None

    def __init__(self):
        if not self.configuration:
            self.configure()

    def configure(self):
        # load default settings
        with open(Path(__file__).parent / "config_default.toml", "rb") as f:
            configuration = tomllib.load(f)

        # override with local settings, only when explicitly pointed at
        local_settings = os.environ.get("NYLAS_SETTINGS")
        if local_settings and Path(local_settings).exists():
            with open(local_settings, "rb") as f:
                configuration.update(tomllib.load(f))

        # override with NYLAS_ prefixed os env settings
        for config_key in configuration:
            env_key = f"{ENV_PREFIX}{config_key}"
            if env_key in os.environ:
                value = os.getenv(env_key)
                # Casting env value
                if isinstance(configuration[config_key], list):
                    value = value.split(",")
                elif isinstance(configuration[config_key], bool):
                    value = value.lower() in ["true", "1", "t", "y", "yes"]
                elif isinstance(configuration[config_key], int):
                    value = int(value)
                elif isinstance(configuration[config_key], float):
                    value = float(value)
                configuration[config_key] = value

        self.configuration = configuration
        self.check()

    def override(self, **kwargs):
        self.configuration.update(kwargs)
        self.check()

    def check(self):
        """Sanity check on config"""
        # Make sure API_SERVER has a scheme and no trailing slash
        api_server = self.configuration["API_SERVER"]
        if not api_server.startswith("http"):
            api_server = f"https://{api_server}"
        self.configuration["API_SERVER"] = api_server.rstrip("/")

    def __getattr__(self, __name):
        return self.configuration.get(__name)

    @property
    def __dict__(self):
        return self.configuration


config = Configurator()
