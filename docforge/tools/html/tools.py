"""HTML cleaning, conversion, resource extraction and formatting operations."""

from __future__ import annotations

import json
from typing import Callable, ClassVar

from ...core.result import OperationResult
from ...core.utils import get_logger
from ..common.interfaces import BaseTool, FileTransformRequest, file_transform_arguments
from .transforms import clean_html, extract_resources, format_html, html_to_markdown, html_to_text

LOGGER = get_logger("docforge.tools.html")


class HtmlCleanRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input HTML file", "Directory where cleaned HTML should be saved"
    )


class HtmlToTextRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input HTML file", "Directory where text file should be saved"
    )


class HtmlToMarkdownRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input HTML file", "Directory where Markdown file should be saved"
    )


class HtmlExtractResourcesRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input HTML file", "Directory where resources should be saved"
    )


class HtmlFormatRequest(FileTransformRequest):
    ARGUMENTS = file_transform_arguments(
        "Path to the input HTML file", "Directory where formatted HTML should be saved"
    )


def _resources_json(markup: str) -> str:
    return json.dumps(extract_resources(markup), indent=2)


class _HtmlTransformTool(BaseTool):
    """Reads one HTML file, transforms it and writes a single output."""

    output_prefix: ClassVar[str]
    output_extension: ClassVar[str]
    success_template: ClassVar[str]
    transform: ClassVar[Callable[[str], str]]

    def run(self, request: FileTransformRequest) -> OperationResult:
        LOGGER.info("Running %s on %s", self.name, request.input_path)
        converted = self.transform(self.read_text(request.input_path))
        output = self.write_output(
            request.output_dir, self.output_prefix, self.output_extension, converted
        )
        self.context.resources["result"] = [output]
        return OperationResult.ok(self.success_template.format(path=output))


class HtmlCleanTool(_HtmlTransformTool):
    name = "html_cleaner"
    description = "Clean HTML by removing unnecessary tags and attributes"
    request_type = HtmlCleanRequest
    output_prefix = "cleaned"
    output_extension = ".html"
    success_template = "Successfully cleaned HTML and saved to {path}"
    transform = staticmethod(clean_html)


class HtmlToTextTool(_HtmlTransformTool):
    name = "html_to_text"
    description = "Convert HTML to plain text while preserving structure"
    request_type = HtmlToTextRequest
    output_prefix = "text"
    output_extension = ".txt"
    success_template = "Successfully converted HTML to text: {path}"
    transform = staticmethod(html_to_text)


class HtmlToMarkdownTool(_HtmlTransformTool):
    name = "html_to_markdown"
    description = "Convert HTML to Markdown format"
    request_type = HtmlToMarkdownRequest
    output_prefix = "markdown"
    output_extension = ".md"
    success_template = "Successfully converted HTML to Markdown: {path}"
    transform = staticmethod(html_to_markdown)


class HtmlExtractResourcesTool(_HtmlTransformTool):
    name = "html_extract_resources"
    description = "Extract all resources (images, videos, links) from HTML"
    request_type = HtmlExtractResourcesRequest
    output_prefix = "resources"
    output_extension = ".json"
    success_template = "Successfully extracted resources: {path}"
    transform = staticmethod(_resources_json)


class HtmlFormatTool(_HtmlTransformTool):
    name = "html_formatter"
    description = "Format and beautify HTML code"
    request_type = HtmlFormatRequest
    output_prefix = "formatted"
    output_extension = ".html"
    success_template = "Successfully formatted HTML: {path}"
    transform = staticmethod(format_html)


__all__ = [
    "HtmlCleanTool",
    "HtmlToTextTool",
    "HtmlToMarkdownTool",
    "HtmlExtractResourcesTool",
    "HtmlFormatTool",
]
