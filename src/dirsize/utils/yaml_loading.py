"""Reading YAML documents whose root must be a mapping.

Both the configuration file and tree definition files are mappings at the
root. Every failure is raised as the caller's own exception type so each
loader keeps its error taxonomy.
"""

from pathlib import Path

import yaml


def load_yaml_mapping(path: Path, *, label: str, error: type[Exception]) -> dict[str, object]:
    """Read a YAML file and return its root mapping.

    An empty document yields an empty mapping.

    Args:
        path: File to read
        label: Human-readable kind of file, used in error messages
        error: Exception type raised on any failure

    Returns:
        Root mapping of the document

    Raises:
        error: If the file is missing, unreadable, malformed or not a mapping
    """
    if not path.is_file():
        msg = f"{label} not found: {path}"
        raise error(msg)

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Failed to read {label.lower()}: {path}\nError: {e}"
        raise error(msg) from e

    try:
        data: object = yaml.safe_load(text)  # pyright: ignore[reportAny]  # YAML boundary
    except yaml.YAMLError as e:
        msg = f"Failed to parse YAML in {label.lower()}: {path}\n{e}"
        raise error(msg) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        msg = f"Expected YAML mapping at root level of {path}, got: {type(data).__name__}"
        raise error(msg)

    return data  # pyright: ignore[reportUnknownVariableType]  # YAML boundary
