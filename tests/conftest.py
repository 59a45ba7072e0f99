from __future__ import annotations

from datetime import date

import pytest

from packgen.models import PackageFields

FIXED_DAY = date(2024, 3, 15)


@pytest.fixture
def fields() -> PackageFields:
    """Field set used across the generation scenarios."""
    return PackageFields(
        company="Acme",
        framework="Core",
        package_name="Widgets",
        author="J. Doe",
        version="1.2.0",
        description="Widget toolkit",
        platform_version="2023.1",
    )


@pytest.fixture
def clock():
    """Deterministic clock returning FIXED_DAY."""
    return lambda: FIXED_DAY
