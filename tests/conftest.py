"""Shared fixtures for mdtable_core tests."""

import pytest

from mdtable_core.editor import InMemoryTextEditor, TextEditorConfig, UnimplementedTextEditor


TABLE_LINES = [
    "Intro",
    "| name | qty |",
    "| :--- | --: |",
    "| foo  | 1   |",
    "Outro",
]


@pytest.fixture
def table_lines():
    return list(TABLE_LINES)


@pytest.fixture
def editor(table_lines):
    return InMemoryTextEditor(table_lines)


@pytest.fixture
def read_only_editor(table_lines):
    return InMemoryTextEditor(table_lines, TextEditorConfig(read_only_rows={0, 4}))


@pytest.fixture
def unimplemented_editor():
    return UnimplementedTextEditor()
