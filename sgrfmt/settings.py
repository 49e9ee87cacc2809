# -----------------------------------------------------------------------------
# es7s/sgrfmt [SGR escape sequences for format strings]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from argparse import Namespace
from typing import Any, Dict, List

from .common import ArgumentError


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        super().__init__(**kwargs)

        self.args: List[str] = []  # KEY=VALUE
        self.debug: int = 0
        self.expression: str|None = None
        self.filename: str|None = None
        self.legend: bool = False
        self.literal: bool = False
        self.no_color: bool = False
        self.no_newline: bool = False
        self.raw: bool = False
        self.version: bool = False
        self.visible: bool = False

    @property
    def process_escapes(self) -> bool:
        return not self.raw

    @property
    def reading_stdin(self) -> bool:
        return self.expression is None and (not self.filename or self.filename == '-')

    @property
    def format_kwargs(self) -> Dict[str, str]:
        result = {}
        for arg in self.args:
            key, sep, value = arg.partition('=')
            if not sep or not key:
                raise ArgumentError(f'Invalid format argument, expected KEY=VALUE: {arg!r}')
            result[key] = value
        return result

    @property
    def log_level(self) -> int:
        if self.debug <= 0:
            return logging.WARNING
        if self.debug == 1:
            return logging.INFO
        return logging.DEBUG


class SettingsManager:
    app_settings: Settings = Settings()

    @staticmethod
    def init():
        SettingsManager.app_settings = Settings()
