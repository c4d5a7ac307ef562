import shlex
from enum import Enum


class ScriptKind(str, Enum):
    PYTHON = "python"
    NODE = "node"

    @classmethod
    def from_file_type(cls, file_type: str) -> "ScriptKind":
        """`py` scripts run under Python, everything else under Node"""
        return cls.PYTHON if file_type == "py" else cls.NODE


def build_command(
    file_type: str, file_path: str, launchers: dict[ScriptKind, str]
) -> list[str]:
    """Build the argv used to launch a script

    Args:
        file_type (str): Extension of the script, without the dot
        file_path (str): Path of the script
        launchers (dict[ScriptKind, str]): Launcher command line per script kind

    Returns:
        list[str]: The launcher split into arguments, followed by the script path
    """
    kind = ScriptKind.from_file_type(file_type)
    if kind not in launchers:
        raise ValueError(f"No launcher configured for script kind: {kind.value}")

    return [*shlex.split(launchers[kind]), str(file_path)]
