"""Core interfaces and context objects shared by docforge tools."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, ClassVar, Mapping

from ...core.exceptions import InvalidArgumentsError
from ...core.result import OperationResult
from ...core.settings import Settings, get_settings
from ...core.utils import (
    build_output_filename,
    ensure_output_dir,
    generate_unique_id,
    get_logger,
    resolve_path,
)

LOGGER = get_logger("docforge.tools")


@dataclass
class OperationContext:
    """Holds shared execution state for a tool invocation."""

    settings: Settings = field(default_factory=get_settings)
    resources: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ArgumentSpec:
    """Describes one named field of an operation's argument bag.

    ``wire_name`` is the key callers send, ``attribute`` the dataclass field
    it populates. When ``converter`` is given it performs the whole check and
    returns the coerced value, raising :class:`InvalidArgumentsError`.
    """

    wire_name: str
    attribute: str
    description: str
    json_type: str = "string"
    required: bool = True
    items: Mapping[str, Any] | None = None
    enum: tuple[str, ...] | None = None
    converter: Callable[[Any], Any] | None = None

    def coerce(self, value: Any) -> Any:
        if self.converter is not None:
            return self.converter(value)
        if self.json_type == "string":
            if not isinstance(value, str):
                raise InvalidArgumentsError(f"'{self.wire_name}' must be a string")
            if self.enum is not None and value not in self.enum:
                choices = ", ".join(self.enum)
                raise InvalidArgumentsError(f"'{self.wire_name}' must be one of: {choices}")
            return value
        if self.json_type == "array":
            if not isinstance(value, (list, tuple)):
                raise InvalidArgumentsError(f"'{self.wire_name}' must be an array")
            if self.items and self.items.get("type") == "string":
                if not all(isinstance(item, str) for item in value):
                    raise InvalidArgumentsError(f"'{self.wire_name}' must contain only strings")
            return tuple(value)
        raise InvalidArgumentsError(f"Unsupported field type for '{self.wire_name}'")  # pragma: no cover

    def schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.json_type, "description": self.description}
        if self.items is not None:
            schema["items"] = dict(self.items)
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        return schema


class OperationRequest:
    """Base class for the typed argument variants, one per operation."""

    ARGUMENTS: ClassVar[tuple[ArgumentSpec, ...]] = ()

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]):
        if not isinstance(arguments, Mapping):
            raise InvalidArgumentsError("no arguments provided")
        values: dict[str, Any] = {}
        for spec in cls.ARGUMENTS:
            raw = arguments.get(spec.wire_name)
            if raw is None:
                if spec.required:
                    raise InvalidArgumentsError(f"missing required field '{spec.wire_name}'")
                continue
            values[spec.attribute] = spec.coerce(raw)
        return cls(**values)

    @classmethod
    def input_schema(cls) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {spec.wire_name: spec.schema() for spec in cls.ARGUMENTS},
            "required": [spec.wire_name for spec in cls.ARGUMENTS if spec.required],
        }


def string_field(wire_name: str, attribute: str, description: str, **kwargs: Any) -> ArgumentSpec:
    return ArgumentSpec(wire_name, attribute, description, json_type="string", **kwargs)


def file_transform_arguments(input_description: str, output_description: str) -> tuple[ArgumentSpec, ...]:
    return (
        string_field("inputPath", "input_path", input_description),
        string_field("outputDir", "output_dir", output_description),
    )


@dataclass(frozen=True)
class FileTransformRequest(OperationRequest):
    """One input file in, one generated file in ``output_dir`` out."""

    input_path: str
    output_dir: str

    ARGUMENTS = file_transform_arguments(
        "Path to the input file", "Directory where the output should be saved"
    )


class BaseTool:
    """Base class for all docforge operations."""

    name: ClassVar[str]
    description: ClassVar[str] = ""
    request_type: ClassVar[type[OperationRequest]]
    produces_files: ClassVar[bool] = True

    def __init__(self, context: OperationContext) -> None:
        self.context = context

    @classmethod
    def descriptor(cls) -> dict[str, Any]:
        return {
            "name": cls.name,
            "description": cls.description,
            "inputSchema": cls.request_type.input_schema(),
        }

    def run(self, request: Any) -> OperationResult:  # pragma: no cover - implemented by subclasses
        raise NotImplementedError

    def read_text(self, path: str | Path) -> str:
        """Decode ``path`` as stored, keeping CRLF line endings intact."""

        return resolve_path(path).read_bytes().decode(self.context.settings.text_encoding)

    def write_output(
        self,
        output_dir: str | Path,
        prefix: str,
        extension: str,
        content: str | bytes,
        *,
        unique_id: str | None = None,
        part: int | None = None,
    ) -> Path:
        """Write ``content`` to a uniquely named file inside ``output_dir``."""

        directory = ensure_output_dir(output_dir)
        filename = build_output_filename(prefix, unique_id or generate_unique_id(), extension, part)
        destination = directory / filename
        if isinstance(content, bytes):
            destination.write_bytes(content)
        else:
            destination.write_text(content, encoding=self.context.settings.text_encoding, newline="")
        LOGGER.debug("Wrote %s", destination)
        return destination

    def execute(self, request: Any) -> OperationResult:
        """Run the tool, converting any failure into a failed result."""

        try:
            return self.run(request)
        except Exception as exc:
            LOGGER.exception("Operation %s failed: %s", self.name, exc)
            return OperationResult.fail(str(exc) or exc.__class__.__name__)


__all__ = [
    "OperationContext",
    "ArgumentSpec",
    "OperationRequest",
    "FileTransformRequest",
    "file_transform_arguments",
    "BaseTool",
    "string_field",
]
