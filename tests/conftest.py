# =============================================================================
# Pytest Configuration and Fixtures
# =============================================================================
# Shared fixtures for the mailrender test suite.
# =============================================================================

import pytest
import tempfile
from pathlib import Path

from mailrender.rendering.converter import OutputKind
from mailrender.rendering.errors import ConversionError


class FakeConverter:
    """Converter stand-in that returns canned output or fails on demand."""

    def __init__(
        self,
        name: str = "fake",
        output: str = "",
        output_kind: OutputKind = OutputKind.TEXT,
        fail: bool = False,
    ) -> None:
        self.name = name
        self.output = output
        self.output_kind = output_kind
        self.fail = fail
        self.calls: list[str] = []

    def convert(self, html: str) -> str:
        self.calls.append(html)
        if self.fail:
            raise ConversionError(self.name, "not available")
        return self.output


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_config_home(temp_dir, monkeypatch):
    """Point XDG_CONFIG_HOME at an empty temporary directory."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(temp_dir))
    return temp_dir


@pytest.fixture
def make_converter():
    """Factory for FakeConverter instances."""
    return FakeConverter


@pytest.fixture
def receipt_text():
    """Laid-out text the way w3m dumps a typical order confirmation."""
    return (
        "                    ORDER CONFIRMATION\n"
        "\n"
        "Thanks for shopping with us.\n"
        "\n"
        "Order details:\n"
        "Order number:    112-4471\n"
        "\n"
        "Order date:      2024-01-15\n"
        "Total amount:    $42.00\n"
        "\n"
        "\n"
        "\n"
        "\n"
        "Questions? Reply to this email.\n"
    )


@pytest.fixture
def sample_html_email():
    """Sample HTML email content for rendering tests."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>Newsletter</title>
        <style>
            body { font-family: Arial, sans-serif; }
            .header { background: #4a90d9; color: white; padding: 20px; }
        </style>
    </head>
    <body>
        <div class="header">
            <h1>Welcome to Our Newsletter!</h1>
        </div>
        <div class="content">
            <p>Hello <strong>User</strong>,</p>
            <p>This is a sample HTML email with various formatting:</p>
            <ul>
                <li>Bold text: <b>bold</b></li>
                <li>Links: <a href="https://example.com/track/aaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaaa">Click here</a></li>
            </ul>
            <script>alert("nope");</script>
        </div>
    </body>
    </html>
    """
