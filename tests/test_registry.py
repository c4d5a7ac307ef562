"""
Tests for the in-memory process registry.
"""

from bots.registry import BotRegistry


class FakeProcess:
    """Stand-in for a Popen handle."""

    def __init__(self, alive: bool = True):
        self.alive = alive
        self.terminated = False

    def poll(self):
        return None if self.alive else 0

    def terminate(self):
        self.terminated = True
        self.alive = False


def test_register_and_lookup():
    registry = BotRegistry()
    process = FakeProcess()

    assert registry.register("bot1", process)

    assert registry.is_running("bot1")
    assert registry.get("bot1") is process
    assert registry.list_ids() == ["bot1"]
    assert registry.count() == 1


def test_register_refuses_existing_entry():
    registry = BotRegistry()
    first, second = FakeProcess(), FakeProcess()
    registry.register("bot1", first)

    assert not registry.register("bot1", second)
    assert registry.get("bot1") is first


def test_unregister_returns_handle():
    registry = BotRegistry()
    process = FakeProcess()
    registry.register("bot1", process)

    assert registry.unregister("bot1") is process
    assert not registry.is_running("bot1")
    assert registry.unregister("bot1") is None


def test_unregister_for_stale_process_keeps_newer_entry():
    """An exit observed for an old process must not remove a newer one."""
    registry = BotRegistry()
    old, new = FakeProcess(alive=False), FakeProcess()
    registry.register("bot1", new)

    assert registry.unregister("bot1", old) is None
    assert registry.get("bot1") is new

    assert registry.unregister("bot1", new) is new


def test_stop_all_terminates_live_processes():
    registry = BotRegistry()
    alive, dead = FakeProcess(), FakeProcess(alive=False)
    registry.register("alive", alive)
    registry.register("dead", dead)

    stopped = registry.stop_all()

    assert sorted(stopped) == ["alive", "dead"]
    assert alive.terminated
    assert not dead.terminated
    assert registry.count() == 0
