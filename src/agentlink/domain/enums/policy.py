"""Policy enumerations."""

from enum import Enum


class RbacPolicyType(str, Enum):
    """Whether an RBAC policy matches on role keys or permission keys."""

    RBAC_ROLES = "RBAC_ROLES"
    RBAC_PERMISSIONS = "RBAC_PERMISSIONS"


class MaskingDetector(str, Enum):
    """Sensitive data detectors a masking policy can switch on.

    Values are the camelCase keys of the ``policyConfiguration`` payload.
    """

    CREDIT_CARD = "creditCard"
    EMAIL_ADDRESS = "emailAddress"
    PHONE_NUMBER = "phoneNumber"
    IP_ADDRESS = "ipAddress"
    US_SSN = "usSsn"
    US_DRIVER_LICENSE = "usDriverLicense"
    US_PASSPORT = "usPassport"
    US_ITIN = "usItin"
    US_BANK_NUMBER = "usBankNumber"
    IBAN_CODE = "ibanCode"
    SWIFT_CODE = "swiftCode"
    BITCOIN_ADDRESS = "bitcoinAddress"
    ETHEREUM_ADDRESS = "ethereumAddress"
    CVV_CVC = "cvvCvc"
    URL = "url"
