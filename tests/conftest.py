"""Shared test fixtures for buildoutline."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from buildoutline.config import OutlineConfig
from buildoutline.core.processor import BuildOutputProcessor
from buildoutline.models.nodes import BuildOutputNodeType


@pytest.fixture
def settings() -> OutlineConfig:
    """Provide rendering settings pinned to the documented defaults."""
    return OutlineConfig(
        include_diagnostics=False,
        indent_unit="\t",
        line_break="\n",
        remove_file_on_dispose=False,
    )


@pytest.fixture
def output_file(tmp_path: Path) -> Path:
    """Provide an existing raw build output file in a temp directory."""
    path = tmp_path / "build-output.log"
    path.write_text("raw build output\n", encoding="utf-8")
    return path


@pytest.fixture
def processor(output_file: Path, settings: OutlineConfig) -> BuildOutputProcessor:
    """Provide an empty processor that leaves its file alone on dispose."""
    return BuildOutputProcessor(output_file, settings=settings)


@pytest.fixture
def error_build(processor: BuildOutputProcessor) -> BuildOutputProcessor:
    """Project "A" > target "B" > error "boom", both closed again.

    Resulting tree::

        A
            B
                boom
                end B
            end A
    """
    processor.add_node(BuildOutputNodeType.PROJECT, "A", True)
    processor.add_node(BuildOutputNodeType.TARGET, "B", True)
    processor.add_node(BuildOutputNodeType.ERROR, "boom", False)
    processor.end_current_node("end B")
    processor.end_current_node("end A")
    return processor


@pytest.fixture
def make_event_log(tmp_path: Path) -> Callable[..., Path]:
    """Factory fixture: write a JSON-lines event log and return its path."""

    def _factory(events: list[dict[str, Any]], name: str = "events.jsonl") -> Path:
        path = tmp_path / name
        path.write_text(
            "\n".join(json.dumps(event) for event in events) + "\n",
            encoding="utf-8",
        )
        return path

    return _factory


@pytest.fixture
def sample_events() -> list[dict[str, Any]]:
    """A two-project build with one error, one warning and diagnostics."""
    return [
        {"action": "add", "node_type": "build", "message": "Build started", "is_start": True},
        {"action": "add", "node_type": "project", "message": "Core.csproj", "is_start": True},
        {"action": "add", "node_type": "target", "message": "Compile", "is_start": True},
        {"action": "add", "node_type": "warning", "message": "CS0168: unused variable"},
        {"action": "add", "node_type": "diagnostics", "message": "csc.exe /noconfig"},
        {"action": "end", "message": "Compile done"},
        {"action": "end", "message": "Core.csproj done"},
        {"action": "add", "node_type": "project", "message": "App.csproj", "is_start": True},
        {"action": "add", "node_type": "error", "message": "CS1002: ; expected"},
        {"action": "end", "message": "App.csproj failed"},
        {"action": "end", "message": "Build failed"},
    ]
