"""PumpkinPower plugin lifecycle: wire config, persistence and the listener."""

from __future__ import annotations

import logging

from .adapters.config_env import load_settings
from .adapters.log_sink import LoggingSink
from .change_set import ChangeSet
from .config import Config
from .config_store import ConfigStore
from .core.config_model import PluginSettings
from .core.listener import BlockListener
from .core.ports import EventRegistry, LogSink
from .core.rule_engine import RuleState


class PumpkinPower:
    """One plugin instance; the host calls on_enable / on_disable."""

    def __init__(self, settings: PluginSettings | None = None, log_sink: LogSink | None = None):
        self.settings = settings or load_settings()
        self._log = log_sink or LoggingSink(self.settings.logger_name)
        self._changes: ChangeSet | None = None
        self._listener: BlockListener | None = None

    @property
    def state(self) -> RuleState | None:
        return self._listener.state if self._listener else None

    def on_enable(self, registry: EventRegistry) -> None:
        settings = self.settings
        if settings.debug:
            logging.getLogger("pumpkinpower").setLevel(logging.DEBUG)

        Config.create_dirs(settings.data_dir)

        config_store = ConfigStore(settings.config_file)
        config_store.save_default()
        notifications_enabled = config_store.load()

        self._changes = ChangeSet(settings.data_file)
        self._changes.ensure_file()
        self._changes.load()

        state = RuleState(
            changed=self._changes,
            notifications_enabled=notifications_enabled,
            unaltered_id=settings.unaltered_id,
            altered_id=settings.altered_id,
        )
        self._listener = BlockListener(state, self._log)
        self._listener.register(registry)
        self._log.info("PumpkinPowerPlugin enabled!")

    def on_disable(self) -> None:
        if self._changes is not None:
            self._changes.save()
        self._log.info("PumpkinPowerPlugin disabled.")
