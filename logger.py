import logging
import os
import traceback
from logConfig import logConfig
from configLoader import configPath


class Logger:
    loggers = {}

    @classmethod
    def getLogger(cls, logName, debugLevel):
        level = logConfig[debugLevel]["DEBUGLEVEL"]
        if logName not in Logger.loggers:
            l = logging.getLogger(f"flycatcher.{logName}")
            os.makedirs(f"{configPath}/logs", exist_ok=True)
            fileHandler = logging.FileHandler(f"{configPath}/logs/{logName.replace('.', '').replace('/', '')[:10]}.log")
            fileHandler.setFormatter(logging.Formatter(logConfig[debugLevel]["FORMAT"]))
            l.addHandler(fileHandler)
            Logger.loggers[logName] = l
        else:
            l = Logger.loggers[logName]
        # the most verbose component sharing a log name decides its level
        if l.level == logging.NOTSET or level < l.level:
            l.setLevel(level)
        return l

    def __init__(self, name='', loggers=['default'], debugLevel="NORMAL"):
        self.loggers = []
        self.display = False
        self.name = name
        if debugLevel not in logConfig:
            debugLevel = "NORMAL"
        for logger in loggers:
            if logger == 'None':
                self.logDebug = self._emptyLog
                self.logInfo = self._emptyLog
                self.logWarn = self._emptyLog
                self.logCritical = self._emptyLog
                break
            self.loggers.append(Logger.getLogger(logger, debugLevel))

    def _emptyLog(self, message, display=False, trace=False):
        pass

    def logDebug(self, message, display=False, trace=False):
        message = f"{self.name} - {message}"
        for logger in self.loggers:
            logger.debug(message)
        if display or self.display:
            print(message)
        if trace:
            traceback.print_exc()

    def logInfo(self, message, display=False, trace=False):
        message = f"{self.name} - {message}"
        for logger in self.loggers:
            logger.info(message)
        if display or self.display:
            print(message)
        if trace:
            traceback.print_exc()

    def logWarn(self, message, display=True, trace=False):
        message = f"{self.name} - {message}"
        for logger in self.loggers:
            logger.warning(message)
        if display or self.display:
            print(message)
            if trace:
                traceback.print_exc()

    def logCritical(self, message, display=True, trace=True):
        message = f"{self.name} - {message}"
        for logger in self.loggers:
            logger.critical(message)
        if display or self.display:
            print(message)
            if trace:
                traceback.print_exc()
