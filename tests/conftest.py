"""Test configuration."""

import pytest
from pathlib import Path

from component_usage.config import reset_config


APP_TSX = """
import React from "react";
import { Button, Card as Panel, Unused } from "your-package-name";
import * as UI from "your-package-name";

export function App() {
  return (
    <div>
      <Button onClick={() => track()}>Save</Button>
      <Button variant="ghost" />
      <Panel title="Settings" />
      <UI.Modal open />
      {UI.formatDate(new Date())}
    </div>
  );
}
"""

LEGACY_JSX = """
export const legacy = () => Button("primary");
"""

HELPERS_JS = """
const { useTheme, formatDate: fmt } = require('your-package-name');

function render() {
  const theme = useTheme();
  return fmt(theme.date) + fmt(Date.now());
}

module.exports = { render };
"""


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the global config between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from inside ``tmp_path``."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def sample_project(workdir):
    """Create a sample source tree and return its root relative to the cwd."""
    root = Path("project")

    (root / "src" / "utils").mkdir(parents=True)
    (root / "src" / "App.tsx").write_text(APP_TSX)
    (root / "src" / "legacy.jsx").write_text(LEGACY_JSX)
    (root / "src" / "utils" / "helpers.js").write_text(HELPERS_JS)

    # Never scanned: ignored directories and other extensions
    (root / "node_modules" / "your-package-name").mkdir(parents=True)
    (root / "node_modules" / "your-package-name" / "index.js").write_text(
        'import { Hidden } from "your-package-name";\nHidden();\n'
    )
    (root / "dist").mkdir()
    (root / "dist" / "bundle.js").write_text(
        'import { Bundled } from "your-package-name";\nconst x = <Bundled />;\n'
    )
    (root / "README.md").write_text('import { Doc } from "your-package-name"\n')

    return root
