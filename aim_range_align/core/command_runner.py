"""
Cooperative command scheduling
"""
from typing import Optional


class CommandRunner:
    """
    Runs at most one command per set of resources, one step per control period.

    Each run_once() calls tick() then is_finished() on the active command and
    deactivates it once finished. Scheduling a command whose requirements
    overlap the active one interrupts the active command first.
    """

    def __init__(self, logger):
        self.logger = logger
        self.active = None

    def is_running(self, command=None) -> bool:
        if command is None:
            return self.active is not None
        return self.active is command

    def schedule(self, command) -> bool:
        if self.active is command:
            self.logger.warn("⚠️  Command already running, ignoring schedule request")
            return False

        if self.active is not None and self.active.requirements & command.requirements:
            held = ", ".join(sorted(self.active.requirements & command.requirements))
            self.logger.info(f"🔀 Interrupting {type(self.active).__name__} (requires {held})")
            self.cancel()

        command.activate()
        self.active = command
        return True

    def run_once(self):
        """Advance the active command by one control period."""
        command = self.active
        if command is None:
            return

        command.tick()
        if command.is_finished():
            self.active = None
            command.deactivate(False)

    def cancel(self) -> Optional[object]:
        """Interrupt the active command; returns it, or None if idle."""
        command = self.active
        if command is None:
            return None
        self.active = None
        command.deactivate(True)
        return command
