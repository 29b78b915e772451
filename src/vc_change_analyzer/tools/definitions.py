"""
Tool definitions for external tool hosts.

Each operation is published as a :class:`ToolDefinition` carrying a name,
a description, a Pydantic input model and an ``execute`` callable. Hosts
call :func:`invoke_tool` with raw keyword arguments; the arguments are
validated against the input model before anything runs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from vc_change_analyzer.config.loader import DEFAULT_CONFIG, AnalyzerConfig
from vc_change_analyzer.message.formatter import CommitMessageStyle
from vc_change_analyzer.tools.commit_tools import (
    AnalysisFailed,
    generate_commit_message,
    get_file_changes_in_directory,
)


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


COLLECT_CHANGES = "collect-changes"
GENERATE_COMMIT_MESSAGE = "generate-commit-message"


class ToolInputError(Exception):
    """Raised when a tool is unknown or its arguments fail validation."""

    pass


class CollectChangesInput(BaseModel):
    """Arguments of the ``collect-changes`` tool."""

    model_config = ConfigDict(populate_by_name=True)

    root_dir: str = Field(
        alias="rootDir",
        min_length=1,
        description="The root directory",
    )


class GenerateCommitMessageInput(BaseModel):
    """Arguments of the ``generate-commit-message`` tool."""

    model_config = ConfigDict(populate_by_name=True)

    root_dir: str = Field(
        alias="rootDir",
        min_length=1,
        description="The root directory to analyze for changes",
    )
    style: Optional[CommitMessageStyle] = Field(
        default=None,
        description="Commit message style: conventional (default), simple or detailed",
    )


@dataclass(frozen=True)
class ToolDefinition:
    """A named operation with a validated input schema."""

    name: str
    description: str
    input_model: Type[BaseModel]
    execute: Callable[[Any], Any]

    def json_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool input, using the external field names."""
        return self.input_model.model_json_schema(by_alias=True)


def build_tools(config: AnalyzerConfig = DEFAULT_CONFIG) -> Tuple[ToolDefinition, ...]:
    """Return the tool definitions bound to ``config``."""

    def collect(params: CollectChangesInput) -> Any:
        result = get_file_changes_in_directory(params.root_dir, config.exclude)
        if isinstance(result, AnalysisFailed):
            return result.to_dict()
        return [record.to_dict() for record in result]

    def generate(params: GenerateCommitMessageInput) -> Any:
        style = params.style or config.default_style
        return generate_commit_message(params.root_dir, style, config.exclude).to_dict()

    return (
        ToolDefinition(
            name=COLLECT_CHANGES,
            description="Gets the code changes made in given directory",
            input_model=CollectChangesInput,
            execute=collect,
        ),
        ToolDefinition(
            name=GENERATE_COMMIT_MESSAGE,
            description=(
                "Analyzes git changes and generates a commit message "
                "with the changed files and the analysis behind it"
            ),
            input_model=GenerateCommitMessageInput,
            execute=generate,
        ),
    )


def invoke_tool(tools: Iterable[ToolDefinition], name: str, arguments: Dict[str, Any]) -> Any:
    """Validate ``arguments`` and run the tool called ``name``.

    Raises
    ------
    ToolInputError
        If no tool has that name or the arguments are invalid.
    """
    tool = next((tool for tool in tools if tool.name == name), None)
    if tool is None:
        raise ToolInputError(f"Unknown tool: {name}")
    try:
        params = tool.input_model.model_validate(arguments)
    except ValidationError as exc:
        logger.error("Invalid arguments for %s: %s", name, exc)
        raise ToolInputError(f"Invalid arguments for {name}: {exc}") from exc
    logger.debug("Invoking tool %s", name)
    return tool.execute(params)
