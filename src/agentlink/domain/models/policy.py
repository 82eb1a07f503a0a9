"""Policy models.

Three policy types share one response shape:

- RBAC policies gate internal tools on role or permission keys.
- Masking policies switch on sensitive data detectors.
- Conditional policies evaluate targeting rules against request attributes.
"""

from dataclasses import dataclass, field
from typing import Any

from agentlink.domain.enums import MaskingDetector

from .payload import compact_payload


@dataclass
class PolicyCondition:
    attribute: str
    op: str
    value: dict[str, Any] = field(default_factory=dict)
    negate: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"attribute": self.attribute, "negate": self.negate, "op": self.op, "value": self.value}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolicyCondition":
        return cls(
            attribute=data.get("attribute") or "",
            op=data.get("op") or "",
            value=data.get("value") or {},
            negate=bool(data.get("negate", False)),
        )


@dataclass
class PolicyTargeting:
    """``if`` conditions and the ``then`` result applied when they all match."""

    conditions: list[PolicyCondition] = field(default_factory=list)
    result: str = ""
    approval_flow_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        then: dict[str, Any] = {"result": self.result}
        if self.approval_flow_id:
            then["approvalFlowId"] = self.approval_flow_id
        return {"if": {"conditions": [condition.to_dict() for condition in self.conditions]}, "then": then}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PolicyTargeting":
        if_block = data.get("if") or {}
        then_block = data.get("then") or {}
        return cls(
            conditions=[PolicyCondition.from_dict(c) for c in if_block.get("conditions") or []],
            result=then_block.get("result", ""),
            approval_flow_id=then_block.get("approvalFlowId") or None,
        )


@dataclass
class MaskingPolicyConfiguration:
    """Set of enabled detectors. Only enabled detectors go on the wire."""

    detectors: set[MaskingDetector] = field(default_factory=set)

    def is_enabled(self, detector: MaskingDetector) -> bool:
        return detector in self.detectors

    def to_dict(self) -> dict[str, bool]:
        return {detector.value: True for detector in MaskingDetector if detector in self.detectors}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MaskingPolicyConfiguration":
        return cls(detectors={detector for detector in MaskingDetector if data.get(detector.value)})


@dataclass
class Policy:
    """Policy as returned by any of the policy endpoints."""

    id: str
    name: str
    type: str = ""
    enabled: bool = False
    vendor_id: str = ""
    description: str = ""
    app_ids: list[str] = field(default_factory=list)
    tenant_id: str = ""
    internal_tool_ids: list[str] = field(default_factory=list)
    targeting: PolicyTargeting | None = None
    keys: list[str] = field(default_factory=list)
    policy_configuration: MaskingPolicyConfiguration | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Policy":
        targeting = data.get("targeting")
        configuration = data.get("policyConfiguration")
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            type=data.get("type") or "",
            enabled=bool(data.get("enabled", False)),
            vendor_id=data.get("vendorId") or "",
            description=data.get("description") or "",
            app_ids=list(data.get("appIds") or []),
            tenant_id=data.get("tenantId") or "",
            internal_tool_ids=list(data.get("internalToolIds") or []),
            targeting=PolicyTargeting.from_dict(targeting) if targeting else None,
            keys=list(data.get("keys") or []),
            policy_configuration=MaskingPolicyConfiguration.from_dict(configuration) if configuration is not None else None,
            metadata=data.get("metadata") or {},
            created_at=data.get("createdAt") or "",
            updated_at=data.get("updatedAt") or "",
        )


def _policy_payload(
    name: str | None,
    description: str | None,
    enabled: bool | None,
    app_ids: list[str] | None,
    tenant_id: str | None,
    internal_tool_ids: list[str] | None,
) -> dict[str, Any]:
    return {
        "name": name,
        "description": description,
        "enabled": enabled,
        "appIds": app_ids,
        "tenantId": tenant_id,
        "internalToolIds": internal_tool_ids,
    }


@dataclass
class CreateRbacPolicyRequest:
    name: str
    type: str
    keys: list[str]
    internal_tool_ids: list[str]
    enabled: bool = True
    description: str | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload.update({"type": self.type, "keys": self.keys})
        return compact_payload(payload, required=("name", "enabled", "internalToolIds", "type", "keys"))


@dataclass
class UpdateRbacPolicyRequest:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    keys: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload["keys"] = self.keys
        return compact_payload(payload)


@dataclass
class CreateMaskingPolicyRequest:
    name: str
    policy_configuration: MaskingPolicyConfiguration
    internal_tool_ids: list[str] = field(default_factory=list)
    enabled: bool = True
    description: str | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload.update(
            {
                "targeting": self.targeting.to_dict() if self.targeting else None,
                "policyConfiguration": self.policy_configuration.to_dict(),
                "metadata": self.metadata,
            }
        )
        return compact_payload(payload, required=("name", "enabled", "internalToolIds", "policyConfiguration"))


@dataclass
class UpdateMaskingPolicyRequest:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    targeting: PolicyTargeting | None = None
    policy_configuration: MaskingPolicyConfiguration | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload.update(
            {
                "targeting": self.targeting.to_dict() if self.targeting else None,
                "policyConfiguration": self.policy_configuration.to_dict() if self.policy_configuration is not None else None,
                "metadata": self.metadata,
            }
        )
        # An empty configuration turns every detector off
        required = ("policyConfiguration",) if self.policy_configuration is not None else ()
        return compact_payload(payload, required=required)


@dataclass
class CreateConditionalPolicyRequest:
    name: str
    internal_tool_ids: list[str] = field(default_factory=list)
    enabled: bool = True
    description: str | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload.update({"targeting": self.targeting.to_dict() if self.targeting else None, "metadata": self.metadata})
        return compact_payload(payload, required=("name", "enabled", "internalToolIds"))


@dataclass
class UpdateConditionalPolicyRequest:
    name: str | None = None
    description: str | None = None
    enabled: bool | None = None
    app_ids: list[str] | None = None
    tenant_id: str | None = None
    internal_tool_ids: list[str] | None = None
    targeting: PolicyTargeting | None = None
    metadata: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = _policy_payload(self.name, self.description, self.enabled, self.app_ids, self.tenant_id, self.internal_tool_ids)
        payload.update({"targeting": self.targeting.to_dict() if self.targeting else None, "metadata": self.metadata})
        return compact_payload(payload)
