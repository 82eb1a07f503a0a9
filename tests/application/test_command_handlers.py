"""Application layer command handler tests with strict type hints."""

from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from neuroglia.core import OperationResult

from agentlink.application.commands import (
    ApplyMcpConfigurationCommand,
    ApplyMcpConfigurationCommandHandler,
    ClearAllowedOriginsCommand,
    ClearAllowedOriginsCommandHandler,
    CreateApplicationCommand,
    CreateApplicationCommandHandler,
    CreateConditionalPolicyCommand,
    CreateConditionalPolicyCommandHandler,
    CreateMaskingPolicyCommand,
    CreateMaskingPolicyCommandHandler,
    CreateRbacPolicyCommand,
    CreateRbacPolicyCommandHandler,
    CreateSourceCommand,
    CreateSourceCommandHandler,
    DeleteApplicationCommand,
    DeleteApplicationCommandHandler,
    DeleteIdentityConfigurationCommand,
    DeleteIdentityConfigurationCommandHandler,
    DeleteMcpConfigurationCommand,
    DeleteMcpConfigurationCommandHandler,
    DeletePolicyCommand,
    DeletePolicyCommandHandler,
    DeleteSourceCommand,
    DeleteSourceCommandHandler,
    DeleteToolsImportCommand,
    DeleteToolsImportCommandHandler,
    ImportToolsCommand,
    ImportToolsCommandHandler,
    SetAllowedOriginsCommand,
    SetAllowedOriginsCommandHandler,
    SetIdentityConfigurationCommand,
    SetIdentityConfigurationCommandHandler,
    UpdateApplicationCommand,
    UpdateApplicationCommandHandler,
    UpdateMaskingPolicyCommand,
    UpdateMaskingPolicyCommandHandler,
    UpdateRbacPolicyCommand,
    UpdateRbacPolicyCommandHandler,
    UpdateSourceCommand,
    UpdateSourceCommandHandler,
)
from agentlink.application.commands.policy import parse_detectors
from agentlink.application.services import hash_schema
from agentlink.domain.enums import MaskingDetector
from agentlink.domain.models import IdentityConfiguration, McpConfiguration, PolicyTargeting, VendorConfig
from agentlink.infrastructure import AgentLinkApiError
from agentlink.integration.models import UNKNOWN_TOOLS_COUNT
from tests.fixtures.factories import ApplicationFactory, PolicyFactory, SourceFactory, ToolFactory
from tests.fixtures.mixins import BaseTestCase


def _api_error(message: str = "failed to call API with status 500: boom") -> AgentLinkApiError:
    return AgentLinkApiError(message=message, status_code=500)


# ============================================================================
# APPLICATION COMMANDS
# ============================================================================


class TestCreateApplicationCommand(BaseTestCase):
    """Test CreateApplicationCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> CreateApplicationCommandHandler:
        return CreateApplicationCommandHandler(mock_api_client)

    @pytest.mark.asyncio
    async def test_create_application_with_defaults(self, handler: CreateApplicationCommandHandler, mock_api_client: MagicMock) -> None:
        """Test creation applies the default access type, type and frontend stack."""
        # Arrange
        mock_api_client.create_application_async = self.create_async_mock(return_value=ApplicationFactory.create(app_id="a1"))
        command = CreateApplicationCommand(name="my-app", app_url="https://app", login_url="https://app/login")

        # Act
        result: OperationResult[Any] = await handler.handle_async(command)

        # Assert
        assert result.is_success
        assert result.status_code == 201
        assert result.data.id == "a1"
        sent = mock_api_client.create_application_async.call_args[0][0].to_dict()
        self.assert_dict_contains(sent, {"accessType": "FREE_ACCESS", "type": "agent", "frontendStack": "react", "isActive": True, "isDefault": False})

    @pytest.mark.asyncio
    async def test_create_application_api_failure(self, handler: CreateApplicationCommandHandler, mock_api_client: MagicMock) -> None:
        """Test API failures become a 500 naming the operation."""
        # Arrange
        mock_api_client.create_application_async = self.create_async_mock(side_effect=_api_error())
        command = CreateApplicationCommand(name="my-app", app_url="https://app", login_url="https://app/login")

        # Act
        result: OperationResult[Any] = await handler.handle_async(command)

        # Assert
        self.assert_failed_with(result, 500, "Unable to create application: failed to call API")


class TestUpdateApplicationCommand(BaseTestCase):
    """Test UpdateApplicationCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> UpdateApplicationCommandHandler:
        return UpdateApplicationCommandHandler(mock_api_client)

    @pytest.mark.asyncio
    async def test_update_application(self, handler: UpdateApplicationCommandHandler, mock_api_client: MagicMock) -> None:
        """Test update returns the re-read application."""
        # Arrange
        mock_api_client.update_application_async = self.create_async_mock(return_value=ApplicationFactory.create(app_id="a1", name="renamed"))

        # Act
        result: OperationResult[Any] = await handler.handle_async(UpdateApplicationCommand(application_id="a1", name="renamed", app_url="https://app", login_url="https://app"))

        # Assert
        assert result.status_code == 200
        assert result.data.name == "renamed"
        assert "frontendStack" not in mock_api_client.update_application_async.call_args[0][1].to_dict()

    @pytest.mark.asyncio
    async def test_update_missing_application(self, handler: UpdateApplicationCommandHandler, mock_api_client: MagicMock) -> None:
        """Test an application gone after update reads as not found."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(UpdateApplicationCommand(application_id="a1", name="x", app_url="https://app", login_url="https://app"))

        # Assert
        self.assert_failed_with(result, 404)


class TestDeleteApplicationCommand(BaseTestCase):
    """Test DeleteApplicationCommand handler."""

    @pytest.mark.asyncio
    async def test_delete_application(self, mock_api_client: MagicMock) -> None:
        """Test delete returns no content."""
        # Act
        result: OperationResult[Any] = await DeleteApplicationCommandHandler(mock_api_client).handle_async(DeleteApplicationCommand(application_id="a1"))

        # Assert
        assert result.is_success
        assert result.status_code == 204
        mock_api_client.delete_application_async.assert_awaited_once_with("a1")


# ============================================================================
# SOURCE COMMANDS
# ============================================================================


class TestCreateSourceCommand(BaseTestCase):
    """Test CreateSourceCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> CreateSourceCommandHandler:
        return CreateSourceCommandHandler(mock_api_client)

    @pytest.mark.asyncio
    async def test_create_source(self, handler: CreateSourceCommandHandler, mock_api_client: MagicMock) -> None:
        """Test creation sends the default timeout and enabled flag."""
        # Arrange
        mock_api_client.create_source_async = self.create_async_mock(return_value=SourceFactory.create(source_id="s1"))

        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateSourceCommand(application_id="app-1", name="api", type="REST", source_url="https://api"))

        # Assert
        assert result.status_code == 201
        sent = mock_api_client.create_source_async.call_args[0][0]
        assert sent.api_timeout == 3000
        assert sent.enabled is True

    @pytest.mark.asyncio
    async def test_create_source_with_invalid_type(self, handler: CreateSourceCommandHandler, mock_api_client: MagicMock) -> None:
        """Test an unknown source type is rejected without calling the API."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateSourceCommand(application_id="app-1", name="api", type="SOAP", source_url="https://api"))

        # Assert
        self.assert_failed_with(result, 400, "Invalid source type: SOAP")
        mock_api_client.create_source_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_source_api_failure(self, handler: CreateSourceCommandHandler, mock_api_client: MagicMock) -> None:
        """Test API failures become a 500."""
        # Arrange
        mock_api_client.create_source_async = self.create_async_mock(side_effect=_api_error())

        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateSourceCommand(application_id="app-1", name="api", type="REST", source_url="https://api"))

        # Assert
        self.assert_failed_with(result, 500, "Unable to create source")


class TestUpdateAndDeleteSourceCommands(BaseTestCase):
    """Test UpdateSourceCommand and DeleteSourceCommand handlers."""

    @pytest.mark.asyncio
    async def test_update_source_sends_only_set_fields(self, mock_api_client: MagicMock) -> None:
        """Test unset fields are left out of the update."""
        # Arrange
        mock_api_client.update_source_async = self.create_async_mock(return_value=SourceFactory.create(source_id="s1", enabled=False))

        # Act
        result: OperationResult[Any] = await UpdateSourceCommandHandler(mock_api_client).handle_async(UpdateSourceCommand(source_id="s1", application_id="app-1", enabled=False))

        # Assert
        assert result.status_code == 200
        source_id, request = mock_api_client.update_source_async.call_args[0]
        assert source_id == "s1"
        assert request.to_dict() == {"appId": "app-1", "enabled": False}

    @pytest.mark.asyncio
    async def test_delete_source(self, mock_api_client: MagicMock) -> None:
        """Test delete passes the application id."""
        # Act
        result: OperationResult[Any] = await DeleteSourceCommandHandler(mock_api_client).handle_async(DeleteSourceCommand(application_id="app-1", source_id="s1"))

        # Assert
        assert result.status_code == 204
        mock_api_client.delete_source_async.assert_awaited_once_with("app-1", "s1")


# ============================================================================
# MCP CONFIGURATION COMMANDS
# ============================================================================


class TestMcpConfigurationCommands(BaseTestCase):
    """Test MCP configuration command handlers."""

    @pytest.mark.asyncio
    async def test_apply_configuration(self, mock_api_client: MagicMock) -> None:
        """Test apply posts the configuration with the default timeout."""
        # Arrange
        mock_api_client.apply_mcp_configuration_async = self.create_async_mock(return_value=McpConfiguration(id="m1", app_id="app-1", base_url="https://mcp"))

        # Act
        result: OperationResult[Any] = await ApplyMcpConfigurationCommandHandler(mock_api_client).handle_async(
            ApplyMcpConfigurationCommand(application_id="app-1", base_url="https://mcp")
        )

        # Assert
        assert result.status_code == 200
        assert mock_api_client.apply_mcp_configuration_async.call_args[0][0].api_timeout == 5000

    @pytest.mark.asyncio
    async def test_delete_configuration_makes_no_remote_call(self, mock_api_client: MagicMock) -> None:
        """Test delete only releases the configuration locally."""
        # Act
        result: OperationResult[Any] = await DeleteMcpConfigurationCommandHandler(mock_api_client).handle_async(DeleteMcpConfigurationCommand(application_id="app-1"))

        # Assert
        assert result.status_code == 204
        mock_api_client.send_async.assert_not_called()


# ============================================================================
# TOOLS IMPORT COMMANDS
# ============================================================================


class TestImportToolsCommand(BaseTestCase):
    """Test ImportToolsCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> ImportToolsCommandHandler:
        return ImportToolsCommandHandler(mock_api_client)

    @pytest.fixture
    def schema_file(self, tmp_path: Path) -> Path:
        path = tmp_path / "petstore.yaml"
        path.write_bytes(b"openapi: 3.0.0\npaths: {}\n")
        return path

    @pytest.mark.asyncio
    async def test_import_tools(self, handler: ImportToolsCommandHandler, mock_api_client: MagicMock, schema_file: Path) -> None:
        """Test the file is uploaded for a REST source and the status records its hash."""
        # Arrange
        mock_api_client.import_and_upsert_schema_async = self.create_async_mock(return_value=ToolFactory.create_many(3))

        # Act
        result: OperationResult[Any] = await handler.handle_async(ImportToolsCommand(application_id="app-1", source_id="s1", schema_file=str(schema_file), schema_type="openapi"))

        # Assert
        assert result.status_code == 200
        assert result.data.id == "app-1:s1"
        assert result.data.schema_hash == hash_schema(schema_file.read_bytes())
        assert result.data.tools_count == UNKNOWN_TOOLS_COUNT
        mock_api_client.import_and_upsert_schema_async.assert_awaited_once_with("app-1", "s1", "REST", schema_file.read_bytes(), "petstore.yaml")

    @pytest.mark.asyncio
    async def test_import_graphql_schema_targets_graphql_source(self, handler: ImportToolsCommandHandler, mock_api_client: MagicMock, schema_file: Path) -> None:
        """Test a graphql schema type maps to the GRAPHQL source type."""
        # Arrange
        mock_api_client.import_and_upsert_schema_async = self.create_async_mock(return_value=[])

        # Act
        await handler.handle_async(ImportToolsCommand(application_id="app-1", source_id="s1", schema_file=str(schema_file), schema_type="graphql"))

        # Assert
        assert mock_api_client.import_and_upsert_schema_async.call_args[0][2] == "GRAPHQL"

    @pytest.mark.asyncio
    async def test_import_with_missing_file(self, handler: ImportToolsCommandHandler, mock_api_client: MagicMock, tmp_path: Path) -> None:
        """Test an unreadable file is rejected before any API call."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(
            ImportToolsCommand(application_id="app-1", source_id="s1", schema_file=str(tmp_path / "missing.yaml"), schema_type="openapi")
        )

        # Assert
        self.assert_failed_with(result, 400, "Unable to read schema file")
        mock_api_client.import_and_upsert_schema_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_import_with_invalid_schema_type(self, handler: ImportToolsCommandHandler, mock_api_client: MagicMock, schema_file: Path) -> None:
        """Test an unknown schema type is rejected."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(ImportToolsCommand(application_id="app-1", source_id="s1", schema_file=str(schema_file), schema_type="wsdl"))

        # Assert
        self.assert_failed_with(result, 400)
        mock_api_client.import_and_upsert_schema_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_import_api_failure(self, handler: ImportToolsCommandHandler, mock_api_client: MagicMock, schema_file: Path) -> None:
        """Test API failures become a 500."""
        # Arrange
        mock_api_client.import_and_upsert_schema_async = self.create_async_mock(side_effect=_api_error())

        # Act
        result: OperationResult[Any] = await handler.handle_async(ImportToolsCommand(application_id="app-1", source_id="s1", schema_file=str(schema_file), schema_type="openapi"))

        # Assert
        self.assert_failed_with(result, 500, "Unable to import schema")


class TestDeleteToolsImportCommand(BaseTestCase):
    """Test DeleteToolsImportCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> DeleteToolsImportCommandHandler:
        return DeleteToolsImportCommandHandler(mock_api_client)

    @pytest.mark.asyncio
    async def test_cleanup_reports_per_tool_warnings(self, handler: DeleteToolsImportCommandHandler, mock_api_client: MagicMock) -> None:
        """Test per-tool failures are returned as warnings on a successful result."""
        # Arrange
        mock_api_client.delete_tools_by_source_async = self.create_async_mock(return_value=["Failed to delete tool t1: boom"])

        # Act
        result: OperationResult[Any] = await handler.handle_async(DeleteToolsImportCommand(application_id="app-1", source_id="s1"))

        # Assert
        assert result.is_success
        assert result.data.warnings == ["Failed to delete tool t1: boom"]

    @pytest.mark.asyncio
    async def test_cleanup_never_fails(self, handler: DeleteToolsImportCommandHandler, mock_api_client: MagicMock) -> None:
        """Test a failed listing is downgraded to a cleanup warning."""
        # Arrange
        mock_api_client.delete_tools_by_source_async = self.create_async_mock(side_effect=_api_error("failed to get tools with status 503: unavailable"))

        # Act
        result: OperationResult[Any] = await handler.handle_async(DeleteToolsImportCommand(application_id="app-1", source_id="s1"))

        # Assert
        assert result.is_success
        self.assert_list_length(result.data.warnings, 1)
        assert result.data.warnings[0].startswith("Cleanup Warning: Unable to delete tools:")


# ============================================================================
# POLICY COMMANDS
# ============================================================================


class TestCreateRbacPolicyCommand(BaseTestCase):
    """Test CreateRbacPolicyCommand handler."""

    @pytest.fixture
    def handler(self, mock_api_client: MagicMock) -> CreateRbacPolicyCommandHandler:
        return CreateRbacPolicyCommandHandler(mock_api_client)

    @pytest.mark.asyncio
    async def test_create_rbac_policy(self, handler: CreateRbacPolicyCommandHandler, mock_api_client: MagicMock) -> None:
        """Test a valid RBAC policy is created."""
        # Arrange
        mock_api_client.create_rbac_policy_async = self.create_async_mock(return_value=PolicyFactory.create(policy_id="p1", type="RBAC_ROLES"))

        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateRbacPolicyCommand(name="admins", type="RBAC_ROLES", keys=["admin"], internal_tool_ids=["t1"]))

        # Assert
        assert result.status_code == 201
        assert result.data.id == "p1"

    @pytest.mark.asyncio
    async def test_create_rbac_policy_requires_tool_ids(self, handler: CreateRbacPolicyCommandHandler, mock_api_client: MagicMock) -> None:
        """Test an RBAC policy without tools is rejected before any API call."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateRbacPolicyCommand(name="admins", type="RBAC_ROLES", keys=["admin"], internal_tool_ids=[]))

        # Assert
        self.assert_failed_with(result, 400, "At least one internal_tool_id is required for RBAC policies")
        mock_api_client.create_rbac_policy_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_rbac_policy_with_invalid_type(self, handler: CreateRbacPolicyCommandHandler, mock_api_client: MagicMock) -> None:
        """Test an unknown RBAC type is rejected."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateRbacPolicyCommand(name="admins", type="RBAC_GROUPS", keys=["admin"], internal_tool_ids=["t1"]))

        # Assert
        self.assert_failed_with(result, 400, "Invalid RBAC policy type")
        mock_api_client.create_rbac_policy_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_rbac_policy_unreadable_after_create(self, handler: CreateRbacPolicyCommandHandler, mock_api_client: MagicMock) -> None:
        """Test a policy that cannot be read back is an internal error."""
        # Act
        result: OperationResult[Any] = await handler.handle_async(CreateRbacPolicyCommand(name="admins", type="RBAC_PERMISSIONS", keys=["read"], internal_tool_ids=["t1"]))

        # Assert
        self.assert_failed_with(result, 500)


class TestUpdateRbacPolicyCommand(BaseTestCase):
    """Test UpdateRbacPolicyCommand handler."""

    @pytest.mark.asyncio
    async def test_update_missing_policy(self, mock_api_client: MagicMock) -> None:
        """Test updating a policy that cannot be read back returns not found."""
        # Act
        result: OperationResult[Any] = await UpdateRbacPolicyCommandHandler(mock_api_client).handle_async(UpdateRbacPolicyCommand(policy_id="p1", enabled=False))

        # Assert
        self.assert_failed_with(result, 404)
        assert mock_api_client.update_rbac_policy_async.call_args[0][1].to_dict() == {"enabled": False}


class TestMaskingPolicyCommands(BaseTestCase):
    """Test masking policy command handlers."""

    def test_parse_detectors(self) -> None:
        configuration = parse_detectors(["creditCard", "usSsn"])

        assert configuration.detectors == {MaskingDetector.CREDIT_CARD, MaskingDetector.US_SSN}

    def test_parse_unknown_detector(self) -> None:
        with pytest.raises(ValueError, match="Unknown masking detector: passport"):
            parse_detectors(["passport"])

    @pytest.mark.asyncio
    async def test_create_masking_policy(self, mock_api_client: MagicMock) -> None:
        """Test the enabled detectors become the policy configuration."""
        # Arrange
        mock_api_client.create_masking_policy_async = self.create_async_mock(return_value=PolicyFactory.create(policy_id="p1", type="MASKING"))

        # Act
        result: OperationResult[Any] = await CreateMaskingPolicyCommandHandler(mock_api_client).handle_async(
            CreateMaskingPolicyCommand(name="pii", detectors=["emailAddress"], internal_tool_ids=["t1"])
        )

        # Assert
        assert result.status_code == 201
        sent = mock_api_client.create_masking_policy_async.call_args[0][0].to_dict()
        assert sent["policyConfiguration"] == {"emailAddress": True}

    @pytest.mark.asyncio
    async def test_create_masking_policy_with_unknown_detector(self, mock_api_client: MagicMock) -> None:
        """Test unknown detectors are rejected."""
        # Act
        result: OperationResult[Any] = await CreateMaskingPolicyCommandHandler(mock_api_client).handle_async(CreateMaskingPolicyCommand(name="pii", detectors=["passport"]))

        # Assert
        self.assert_failed_with(result, 400, "Unknown masking detector")
        mock_api_client.create_masking_policy_async.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_masking_policy_without_detectors_keeps_configuration(self, mock_api_client: MagicMock) -> None:
        """Test an update without detectors leaves the configuration out."""
        # Arrange
        mock_api_client.update_masking_policy_async = self.create_async_mock(return_value=PolicyFactory.create(policy_id="p1"))

        # Act
        result: OperationResult[Any] = await UpdateMaskingPolicyCommandHandler(mock_api_client).handle_async(UpdateMaskingPolicyCommand(policy_id="p1", name="renamed"))

        # Assert
        assert result.status_code == 200
        assert mock_api_client.update_masking_policy_async.call_args[0][1].to_dict() == {"name": "renamed"}


class TestConditionalAndDeletePolicyCommands(BaseTestCase):
    """Test conditional policy creation and policy deletion."""

    @pytest.mark.asyncio
    async def test_create_conditional_policy(self, mock_api_client: MagicMock) -> None:
        """Test the targeting is sent with the policy."""
        # Arrange
        mock_api_client.create_conditional_policy_async = self.create_async_mock(return_value=PolicyFactory.create(policy_id="p1"))
        targeting = PolicyTargeting(result="REQUIRE_APPROVAL", approval_flow_id="flow-1")

        # Act
        result: OperationResult[Any] = await CreateConditionalPolicyCommandHandler(mock_api_client).handle_async(
            CreateConditionalPolicyCommand(name="approval", targeting=targeting, internal_tool_ids=["t1"])
        )

        # Assert
        assert result.status_code == 201
        sent = mock_api_client.create_conditional_policy_async.call_args[0][0].to_dict()
        assert sent["targeting"]["then"] == {"result": "REQUIRE_APPROVAL", "approvalFlowId": "flow-1"}

    @pytest.mark.asyncio
    async def test_delete_policy(self, mock_api_client: MagicMock) -> None:
        """Test delete returns no content."""
        # Act
        result: OperationResult[Any] = await DeletePolicyCommandHandler(mock_api_client).handle_async(DeletePolicyCommand(policy_id="p1", policy_kind="rbac"))

        # Assert
        assert result.status_code == 204
        mock_api_client.delete_policy_async.assert_awaited_once_with("p1")

    @pytest.mark.asyncio
    async def test_delete_policy_api_failure(self, mock_api_client: MagicMock) -> None:
        """Test API failures become a 500."""
        # Arrange
        mock_api_client.delete_policy_async = self.create_async_mock(side_effect=_api_error())

        # Act
        result: OperationResult[Any] = await DeletePolicyCommandHandler(mock_api_client).handle_async(DeletePolicyCommand(policy_id="p1"))

        # Assert
        self.assert_failed_with(result, 500, "Unable to delete")


# ============================================================================
# VENDOR COMMANDS
# ============================================================================


class TestAllowedOriginsCommands(BaseTestCase):
    """Test allowed origins command handlers."""

    @pytest.mark.asyncio
    async def test_set_allowed_origins_reports_requested_origins(self, mock_api_client: MagicMock) -> None:
        """Test the requested origins are reported even when the API appends slashes."""
        # Arrange
        mock_api_client.update_allowed_origins_async = self.create_async_mock(return_value=VendorConfig(id="vendor-1", allowed_origins=["https://a.com/"]))

        # Act
        result: OperationResult[Any] = await SetAllowedOriginsCommandHandler(mock_api_client).handle_async(SetAllowedOriginsCommand(allowed_origins=["https://a.com"]))

        # Assert
        assert result.status_code == 200
        assert result.data.id == "vendor-1"
        assert result.data.allowed_origins == ["https://a.com"]

    @pytest.mark.asyncio
    async def test_clear_allowed_origins(self, mock_api_client: MagicMock) -> None:
        """Test clearing puts an empty list."""
        # Act
        result: OperationResult[Any] = await ClearAllowedOriginsCommandHandler(mock_api_client).handle_async(ClearAllowedOriginsCommand())

        # Assert
        assert result.status_code == 204
        mock_api_client.update_allowed_origins_async.assert_awaited_once_with([])


class TestIdentityConfigurationCommands(BaseTestCase):
    """Test identity configuration command handlers."""

    @pytest.mark.asyncio
    async def test_set_identity_configuration(self, mock_api_client: MagicMock) -> None:
        """Test the token expiration is sent."""
        # Arrange
        mock_api_client.update_identity_configuration_async = self.create_async_mock(return_value=IdentityConfiguration(id="idc-1", default_token_expiration=86400))

        # Act
        result: OperationResult[Any] = await SetIdentityConfigurationCommandHandler(mock_api_client).handle_async(SetIdentityConfigurationCommand(default_token_expiration=86400))

        # Assert
        assert result.status_code == 200
        assert mock_api_client.update_identity_configuration_async.call_args[0][0].to_dict() == {"defaultTokenExpiration": 86400}

    @pytest.mark.asyncio
    async def test_delete_identity_configuration_makes_no_remote_call(self, mock_api_client: MagicMock) -> None:
        """Test delete only releases the configuration locally."""
        # Act
        result: OperationResult[Any] = await DeleteIdentityConfigurationCommandHandler(mock_api_client).handle_async(DeleteIdentityConfigurationCommand())

        # Assert
        assert result.status_code == 204
        mock_api_client.update_identity_configuration_async.assert_not_called()
