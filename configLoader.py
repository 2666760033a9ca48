from dotenv import load_dotenv
import os
import yaml

load_dotenv()
configPath = os.getenv("FLYCATCHER_PATH") or os.getcwd()

defaultDbSettings = {
    "PATH": ":memory:",
    "DATABASE": "main",
    "DEBUGLEVEL": "NORMAL",
    "LOGNAMES": ["default"],
}
envOverrides = {
    "PATH": "FLYCATCHER_DB_PATH",
    "DATABASE": "FLYCATCHER_DATABASE",
}


class ConfigurationError(Exception):
    pass


def overrideSettings(overrides, dbSettings):
    for key, value in overrides.items():
        if value != "":
            dbSettings[key] = value


def loadConfig(config):
    if isinstance(config, dict):
        cfg = config
    else:
        with open(config, 'r') as config_file:
            cfg = yaml.safe_load(config_file)
    if not isinstance(cfg, dict) or "DBSETTINGS" not in cfg:
        raise ConfigurationError(f"config has no DBSETTINGS section: {config}")
    dbSettings = dict(defaultDbSettings)
    dbSettings.update(cfg["DBSETTINGS"] or {})
    overrideSettings(cfg.get("DBOVERRIDE") or {}, dbSettings)
    # environment wins over the file
    for key, envName in envOverrides.items():
        value = os.getenv(envName)
        if value:
            dbSettings[key] = value
    if isinstance(dbSettings["LOGNAMES"], str):
        dbSettings["LOGNAMES"] = [dbSettings["LOGNAMES"]]
    return dbSettings
