from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from docforge.core.result import OperationResult
from docforge.tools import BUILTIN_TOOLS, dispatch, registry
from docforge.tools.common.interfaces import BaseTool, OperationContext, OperationRequest
from docforge.tools.common.pipeline import ToolRegistry

EXPECTED_OPERATIONS = [
    "document_reader",
    "pdf_merger",
    "pdf_splitter",
    "docx_to_pdf",
    "docx_to_html",
    "html_cleaner",
    "html_to_text",
    "html_to_markdown",
    "html_extract_resources",
    "html_formatter",
    "text_diff",
    "text_splitter",
    "text_formatter",
    "text_encoding_converter",
]


def test_registry_lists_every_operation_in_order() -> None:
    assert registry.names() == EXPECTED_OPERATIONS
    assert len(registry) == len(BUILTIN_TOOLS)


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        registry.tools["extra"] = BaseTool  # type: ignore[index]


def test_registry_rejects_duplicate_names() -> None:
    with pytest.raises(ValueError, match="already registered"):
        ToolRegistry([BUILTIN_TOOLS[0], BUILTIN_TOOLS[0]])


def test_descriptors_carry_input_schemas() -> None:
    descriptors = {descriptor["name"]: descriptor for descriptor in registry.descriptors()}

    split_schema = descriptors["pdf_splitter"]["inputSchema"]
    assert split_schema["type"] == "object"
    assert split_schema["required"] == ["inputPath", "outputDir", "pageRanges"]
    assert descriptors["text_splitter"]["inputSchema"]["properties"]["splitBy"]["enum"] == [
        "lines",
        "delimiter",
    ]
    assert descriptors["document_reader"]["inputSchema"]["required"] == ["filePath"]


def test_unknown_tool() -> None:
    result = dispatch("pdf_shredder", {"inputPath": "a.pdf"})
    assert result == OperationResult.fail("Unknown tool: pdf_shredder")


@pytest.mark.parametrize("operation", EXPECTED_OPERATIONS)
def test_missing_arguments_are_reported_per_operation(operation: str) -> None:
    result = dispatch(operation, None)
    assert result.error == f"Invalid arguments for {operation}: no arguments provided"


def test_non_mapping_arguments() -> None:
    result = dispatch("pdf_merger", ["a.pdf"])  # type: ignore[arg-type]
    assert result.error == "Invalid arguments for pdf_merger: no arguments provided"


@pytest.mark.parametrize(
    ("operation", "arguments", "detail"),
    [
        ("pdf_merger", {"outputDir": "out"}, "missing required field 'inputPaths'"),
        ("pdf_merger", {"inputPaths": "a.pdf", "outputDir": "out"}, "'inputPaths' must be an array"),
        ("pdf_merger", {"inputPaths": [], "outputDir": "out"}, "'inputPaths' must list at least one PDF"),
        ("pdf_merger", {"inputPaths": ["a.pdf", 3], "outputDir": "out"}, "'inputPaths' must contain only strings"),
        ("document_reader", {"filePath": 42}, "'filePath' must be a string"),
        ("text_splitter", {"inputPath": "a", "outputDir": "b", "splitBy": "lines"}, "missing required field 'value'"),
        ("text_splitter", {"inputPath": "a", "outputDir": "b", "splitBy": "lines", "value": [1]}, "'value' must be a string or an integer"),
        ("pdf_splitter", {"inputPath": "a", "outputDir": "b", "pageRanges": [{"start": 1}]}, "each page range needs 'start' and 'end'"),
    ],
)
def test_shape_errors_name_the_field(operation: str, arguments: dict, detail: str) -> None:
    result = dispatch(operation, arguments)
    assert result.error == f"Invalid arguments for {operation}: {detail}"


def test_pdf_merger_operation(
    pdf_factory: Callable[..., Path], output_dir: Path, context: OperationContext
) -> None:
    first = pdf_factory("a.pdf", pages=2)
    second = pdf_factory("b.pdf", pages=1)

    result = dispatch(
        "pdf_merger",
        {"inputPaths": [str(first), str(second)], "outputDir": str(output_dir)},
        context=context,
    )

    assert result.success, result.error
    (output,) = context.resources["result"]
    assert result.data == f"Successfully merged 2 PDFs into {output}"


def test_pdf_splitter_operation(sample_pdf: Path, output_dir: Path, context: OperationContext) -> None:
    result = dispatch(
        "pdf_splitter",
        {
            "inputPath": str(sample_pdf),
            "outputDir": str(output_dir),
            "pageRanges": [{"start": 1, "end": 2}, {"start": 3, "end": 5}],
        },
        context=context,
    )

    assert result.success, result.error
    first, second = context.resources["result"]
    assert result.data == f"Successfully split PDF into 2 files: {first}, {second}"


def test_pdf_splitter_out_of_range_fails_without_output(sample_pdf: Path, output_dir: Path) -> None:
    result = dispatch(
        "pdf_splitter",
        {
            "inputPath": str(sample_pdf),
            "outputDir": str(output_dir),
            "pageRanges": [{"start": 1, "end": 2}, {"start": 4, "end": 9}],
        },
    )

    assert result.error == "Invalid page range: 4-9. PDF only has 5 pages"
    assert not output_dir.exists() or not any(output_dir.iterdir())


def test_unexpected_exceptions_become_failed_results() -> None:
    class ExplodingRequest(OperationRequest):
        @classmethod
        def from_arguments(cls, arguments):
            return cls()

    class ExplodingTool(BaseTool):
        name = "exploding"
        request_type = ExplodingRequest

        def run(self, request):
            raise RuntimeError("kaboom")

    local = ToolRegistry([ExplodingTool])

    assert local.dispatch("exploding", {}) == OperationResult.fail("kaboom")


def test_repeated_calls_into_one_directory_never_overwrite(
    text_file_factory: Callable[..., Path], output_dir: Path
) -> None:
    first_source = text_file_factory("first.txt", "one\ntwo")
    second_source = text_file_factory("second.txt", "three\nfour")

    first_context = OperationContext()
    second_context = OperationContext()
    first = dispatch(
        "text_splitter",
        {"inputPath": str(first_source), "outputDir": str(output_dir), "splitBy": "lines", "value": 1},
        context=first_context,
    )
    second = dispatch(
        "text_splitter",
        {"inputPath": str(second_source), "outputDir": str(output_dir), "splitBy": "lines", "value": 1},
        context=second_context,
    )

    assert first.success and second.success
    first_outputs = first_context.resources["result"]
    second_outputs = second_context.resources["result"]
    assert set(first_outputs).isdisjoint(second_outputs)
    assert len(list(output_dir.iterdir())) == 4
    assert [path.read_text(encoding="utf-8") for path in first_outputs] == ["one", "two"]
    assert [path.read_text(encoding="utf-8") for path in second_outputs] == ["three", "four"]
