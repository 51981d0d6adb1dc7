"""Structural email address validation shared by the identity context."""

_FORBIDDEN = (";", ",", "(", ")", '"', ":", "<", ">", "[", "]", "\\")


def normalize_email(address: str) -> str:
    return address.strip().lower()


def is_valid_email(address: str) -> bool:
    """Check that an address has one ``@``, sane local/domain parts and no forbidden characters."""
    if not address or any(ws in address for ws in (" ", "\t", "\n")):
        return False

    if address.count("@") != 1:
        return False

    local_part, domain_part = address.split("@", 1)

    if not local_part or local_part.startswith(".") or local_part.endswith("."):
        return False

    if not domain_part or domain_part.startswith(".") or domain_part.endswith("."):
        return False

    if "." not in domain_part or ".." in local_part or ".." in domain_part:
        return False

    for label in domain_part.split("."):
        if label.startswith("-") or label.endswith("-"):
            return False

    return not any(forbidden in address for forbidden in _FORBIDDEN)
