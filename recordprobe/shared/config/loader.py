"""
Configuration loader

Reads TOML files and validates them against Pydantic models.
"""

import tomllib
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar, Union, overload

from pydantic import BaseModel, ValidationError

from recordprobe.shared.exceptions.exception_system import OperationError

ModelT = TypeVar("ModelT", bound=BaseModel)


@overload
def load_config(path: Union[str, Path]) -> Dict[str, Any]: ...


@overload
def load_config(path: Union[str, Path], model_class: Type[ModelT]) -> ModelT: ...


def load_config(
    path: Union[str, Path], model_class: Optional[Type[ModelT]] = None
) -> Union[ModelT, Dict[str, Any]]:
    """
    Load a TOML configuration file.

    Args:
        path: Path to the TOML file
        model_class: Optional Pydantic model to validate against. When omitted
            the raw dictionary is returned.

    Returns:
        The validated model instance, or the parsed dictionary

    Raises:
        OperationError: If the file is missing, is not valid TOML, or does not
            validate against the model
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise OperationError(
            f"Configuration file not found: {path}", context={"path": str(path)}
        )

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise OperationError(
            f"Error decoding TOML from {path}: {e}", context={"path": str(path)}
        ) from e

    if model_class is None:
        return data

    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        raise OperationError(
            f"Error validating configuration from {path}: {e}",
            context={"path": str(path), "model": model_class.__name__},
        ) from e
