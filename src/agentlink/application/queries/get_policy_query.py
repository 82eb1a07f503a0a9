"""Get policy queries with handlers.

Each policy type is read from its own endpoint, so there is one query per type.
"""

from dataclasses import dataclass

from neuroglia.core import OperationResult
from neuroglia.mediation import Query, QueryHandler

from agentlink.application.handler_base import AgentLinkHandlerBase
from agentlink.domain.models import Policy
from agentlink.infrastructure import AgentLinkApiClient, AgentLinkApiError


@dataclass
class GetRbacPolicyQuery(Query[OperationResult[Policy]]):
    policy_id: str


class GetRbacPolicyQueryHandler(AgentLinkHandlerBase, QueryHandler[GetRbacPolicyQuery, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetRbacPolicyQuery) -> OperationResult[Policy]:
        try:
            policy = await self.api_client.get_rbac_policy_async(request.policy_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "RBAC policy", e)

        if policy is None:
            return self.not_found(Policy, request.policy_id)
        return self.ok(policy)


@dataclass
class GetMaskingPolicyQuery(Query[OperationResult[Policy]]):
    policy_id: str


class GetMaskingPolicyQueryHandler(AgentLinkHandlerBase, QueryHandler[GetMaskingPolicyQuery, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetMaskingPolicyQuery) -> OperationResult[Policy]:
        try:
            policy = await self.api_client.get_masking_policy_async(request.policy_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "masking policy", e)

        if policy is None:
            return self.not_found(Policy, request.policy_id)
        return self.ok(policy)


@dataclass
class GetConditionalPolicyQuery(Query[OperationResult[Policy]]):
    policy_id: str


class GetConditionalPolicyQueryHandler(AgentLinkHandlerBase, QueryHandler[GetConditionalPolicyQuery, OperationResult[Policy]]):
    def __init__(self, api_client: AgentLinkApiClient):
        super().__init__(api_client)

    async def handle_async(self, request: GetConditionalPolicyQuery) -> OperationResult[Policy]:
        try:
            policy = await self.api_client.get_conditional_policy_async(request.policy_id)
        except AgentLinkApiError as e:
            return self._remote_error("read", "conditional policy", e)

        if policy is None:
            return self.not_found(Policy, request.policy_id)
        return self.ok(policy)
