import logging

logConfig = {
    "NONE": {
        "DEBUGLEVEL": logging.CRITICAL,
        "FORMAT": "%(asctime)s - %(levelname)-9s - %(message)s",
    },
    "NORMAL": {
        "DEBUGLEVEL": logging.WARNING,
        "FORMAT": "%(asctime)s - %(levelname)-9s - %(message)s",
    },
    "HIGH": {
        "DEBUGLEVEL": logging.INFO,
        "FORMAT": "%(asctime)s - %(name)s - %(levelname)-9s - %(message)s",
    },
    "EXTREME": {
        "DEBUGLEVEL": logging.DEBUG,
        "FORMAT": "%(asctime)s - %(name)s - %(levelname)-9s - %(message)s",
    },
}
