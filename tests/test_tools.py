"""
Tests for MCP tools.

Tests the MCP tool implementations for token inspection, validation,
builds and project setup.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_tokens import async_server
from chuk_mcp_tokens.builder import TokenBuilder
from chuk_mcp_tokens.config import BuildConfig
from chuk_mcp_tokens.tools import register_build_tools, register_inspection_tools


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def builder(build_config: BuildConfig) -> TokenBuilder:
    """Builder over the sample project."""
    return TokenBuilder(build_config)


@pytest.fixture
def empty_builder(temp_dir: Path) -> TokenBuilder:
    """Builder over a project with no token files."""
    return TokenBuilder(BuildConfig().resolve(temp_dir))


@pytest.fixture
def inspection_tools(builder: TokenBuilder) -> dict:
    return register_inspection_tools(MockMCPServer("test"), builder)


@pytest.fixture
def build_tools(builder: TokenBuilder) -> dict:
    return register_build_tools(MockMCPServer("test"), builder)


class TestInspectionTools:
    """Tests for inspection tools."""

    def test_registration(self, builder: TokenBuilder) -> None:
        """Every tool is registered with the server."""
        mcp = MockMCPServer("test")
        tools = register_inspection_tools(mcp, builder)
        assert set(tools) == {
            "tokens_list",
            "tokens_describe",
            "tokens_evaluate",
            "tokens_sample",
            "tokens_list_breakpoints",
        }
        assert set(mcp.tools) == set(tools)

    @pytest.mark.asyncio
    async def test_list_tokens(self, inspection_tools: dict):
        """List all tokens."""
        data = json.loads(await inspection_tools["tokens_list"]())

        assert data["status"] == "success"
        assert data["count"] == 6
        assert data["categories"] == ["fontSizes", "spacing"]
        assert data["tokens"][0] == {
            "key": "fontSizes/sm",
            "kind": "fluid",
            "type": "fontSize",
            "property": "--font-sizes-sm",
        }

    @pytest.mark.asyncio
    async def test_list_tokens_by_category(self, inspection_tools: dict):
        """Filter tokens by category."""
        data = json.loads(await inspection_tools["tokens_list"](category="spacing"))

        assert data["count"] == 3
        assert [t["key"] for t in data["tokens"]] == [
            "spacing/xs",
            "spacing/sm",
            "spacing/gutter",
        ]

    @pytest.mark.asyncio
    async def test_list_tokens_missing_files(self, empty_builder: TokenBuilder):
        """Missing token files are reported as an error."""
        tools = register_inspection_tools(MockMCPServer("test"), empty_builder)
        data = json.loads(await tools["tokens_list"]())

        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_describe_fluid(self, inspection_tools: dict):
        """Describe a fluid token."""
        data = json.loads(await inspection_tools["tokens_describe"](key="fontSizes/base"))

        assert data["status"] == "success"
        token = data["token"]
        assert token["kind"] == "fluid"
        assert token["breakpoints"] == {"phone": 18, "tablet": 18.97, "desktop": 20}
        assert token["css"]["property"] == "--font-sizes-base"
        assert token["css"]["value"].startswith("clamp(18px")
        assert token["source"]["fluid"]["maxWidth"] == 1240

    @pytest.mark.asyncio
    async def test_describe_responsive(self, inspection_tools: dict):
        """Describe a responsive token."""
        data = json.loads(await inspection_tools["tokens_describe"](key="spacing/sm"))

        assert data["token"]["breakpoints"] == {"phone": 4, "tablet": 6, "desktop": 8}
        assert data["token"]["css"]["value"] == "8px"
        assert data["token"]["type"] == "dimension"

    @pytest.mark.asyncio
    async def test_describe_not_found(self, inspection_tools: dict):
        """Describe a token that doesn't exist."""
        data = json.loads(await inspection_tools["tokens_describe"](key="spacing/huge"))

        assert data["status"] == "error"
        assert "not found" in data["message"]

    @pytest.mark.asyncio
    async def test_evaluate_fluid(self, inspection_tools: dict):
        """Evaluate a fluid token inside its range."""
        data = json.loads(
            await inspection_tools["tokens_evaluate"](key="fontSizes/base", viewport_width=780)
        )

        assert data["status"] == "success"
        assert data["value"] == 19
        assert data["in_range"] is True
        assert data["css"].startswith("clamp(")

    @pytest.mark.asyncio
    async def test_evaluate_fluid_clamped(self, inspection_tools: dict):
        """Evaluating past maxWidth stays at maxSize."""
        data = json.loads(
            await inspection_tools["tokens_evaluate"](key="fontSizes/base", viewport_width=2000)
        )

        assert data["value"] == 20
        assert data["in_range"] is False

    @pytest.mark.asyncio
    async def test_evaluate_responsive(self, inspection_tools: dict):
        """Responsive tokens resolve to the active breakpoint."""
        data = json.loads(
            await inspection_tools["tokens_evaluate"](key="spacing/sm", viewport_width=800)
        )

        assert data["value"] == 6
        assert "in_range" not in data

    @pytest.mark.asyncio
    async def test_evaluate_not_found(self, inspection_tools: dict):
        """Evaluate a token that doesn't exist."""
        data = json.loads(
            await inspection_tools["tokens_evaluate"](key="nothing", viewport_width=800)
        )
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_sample(self, inspection_tools: dict):
        """Sample a category at every breakpoint."""
        data = json.loads(await inspection_tools["tokens_sample"](category="spacing"))

        assert data["status"] == "success"
        assert data["breakpoints"] == {"phone": 320, "tablet": 768, "desktop": 1240}
        assert data["values"]["spacing/sm"] == {"phone": 4, "tablet": 6, "desktop": 8}
        assert data["values"]["spacing/gutter"] == {"phone": 16, "tablet": 16, "desktop": 16}
        assert "fontSizes/base" not in data["values"]

    @pytest.mark.asyncio
    async def test_sample_missing_breakpoint(self, make_project):
        """Sampling an incomplete responsive token reports the error."""
        project = make_project(spacing={"spacing": {"sm": {"responsive": {"phone": 4}}}})
        tools = register_inspection_tools(
            MockMCPServer("test"), TokenBuilder(BuildConfig().resolve(project))
        )
        data = json.loads(await tools["tokens_sample"]())

        assert data["status"] == "error"
        assert "tablet" in data["message"]

    @pytest.mark.asyncio
    async def test_list_breakpoints(self, inspection_tools: dict):
        """List the configured breakpoints."""
        data = json.loads(await inspection_tools["tokens_list_breakpoints"]())

        assert data["status"] == "success"
        assert [bp["name"] for bp in data["breakpoints"]] == ["phone", "tablet", "desktop"]
        assert data["breakpoints"][2]["viewport_width"] == 1240
        assert data["precision"] == 2


class TestBuildTools:
    """Tests for build tools."""

    @pytest.mark.asyncio
    async def test_validate(self, build_tools: dict):
        """Validate a clean project."""
        data = json.loads(await build_tools["tokens_validate"]())

        assert data["status"] == "success"
        assert data["valid"] is True
        assert data["token_count"] == 6
        assert data["errors"] == 0

    @pytest.mark.asyncio
    async def test_validate_with_errors(self, make_project):
        """Validation errors are returned, not raised."""
        project = make_project(
            spacing={"spacing": {"sm": {"responsive": {"phone": 4, "desktop": 8}}}}
        )
        tools = register_build_tools(
            MockMCPServer("test"), TokenBuilder(BuildConfig().resolve(project))
        )
        data = json.loads(await tools["tokens_validate"]())

        assert data["status"] == "success"
        assert data["valid"] is False
        assert data["errors"] == 1
        assert data["issues"][0]["code"] == "MISSING_BREAKPOINT"

    @pytest.mark.asyncio
    async def test_build(self, build_tools: dict, build_config: BuildConfig):
        """Build writes every artifact."""
        data = json.loads(await build_tools["tokens_build"]())

        assert data["status"] == "success"
        assert len(data["files"]) == 6
        assert data["message"] == "Built 6 tokens into 6 files."
        assert build_config.plugin_path.is_file()

    @pytest.mark.asyncio
    async def test_build_failure(self, empty_builder: TokenBuilder):
        """A failed build returns an error status."""
        tools = register_build_tools(MockMCPServer("test"), empty_builder)
        data = json.loads(await tools["tokens_build"]())

        assert data["status"] == "error"
        assert not empty_builder.config.output_dir.exists()

    @pytest.mark.asyncio
    async def test_init_project(self, empty_builder: TokenBuilder):
        """Copy the starter tokens, then build them."""
        tools = register_build_tools(MockMCPServer("test"), empty_builder)

        data = json.loads(await tools["tokens_init_project"]())
        assert data["status"] == "success"
        assert len(data["files"]) == 2

        data = json.loads(await tools["tokens_build"]())
        assert data["status"] == "success"

    @pytest.mark.asyncio
    async def test_init_project_existing_files(self, build_tools: dict):
        """Existing token files are only replaced with overwrite."""
        data = json.loads(await build_tools["tokens_init_project"]())
        assert data["status"] == "error"
        assert "already exist" in data["message"]

        data = json.loads(await build_tools["tokens_init_project"](overwrite=True))
        assert data["status"] == "success"


class TestServer:
    """Tests for server assembly."""

    def test_create_server(self, build_config: BuildConfig, monkeypatch: pytest.MonkeyPatch):
        """All tools are registered on one server."""
        monkeypatch.setattr(async_server, "ChukMCPServer", MockMCPServer)

        mcp, tools = async_server.create_server(build_config)

        assert mcp.name == "chuk-mcp-tokens"
        assert len(tools) == 8
        assert set(mcp.tools) == set(tools)
