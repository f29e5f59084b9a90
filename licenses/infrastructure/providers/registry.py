"""
Provider registry.

Maps provider names to their implementation and configuration classes.
"""
import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Tuple, Type, Union

from core.domain.exceptions import ValidationError
from core.domain.value_objects import AboutData
from licenses.infrastructure.providers.cpanel.configuration import (
    CPanelConfiguration,
)
from licenses.infrastructure.providers.cpanel.provider import CPanelProvider
from licenses.infrastructure.providers.example.configuration import (
    ExampleConfiguration,
)
from licenses.infrastructure.providers.example.provider import ExampleProvider
from licenses.ports.software_license_provider import SoftwareLicenseProvider

logger = logging.getLogger(__name__)

PROVIDERS: Dict[str, Tuple[Type[SoftwareLicenseProvider], type]] = {
    "cpanel": (CPanelProvider, CPanelConfiguration),
    "example": (ExampleProvider, ExampleConfiguration),
}


def available_providers() -> List[Tuple[str, AboutData]]:
    """Return (name, about data) for every registered provider."""
    return [
        (name, provider_class.about_provider())
        for name, (provider_class, _) in sorted(PROVIDERS.items())
    ]


def create_provider(
    name: str, configuration: Union[Mapping[str, Any], object]
) -> SoftwareLicenseProvider:
    """
    Instantiate a provider by name.

    Args:
        name: Registered provider name, e.g. "cpanel"
        configuration: Configuration object, or a mapping to build one from

    Returns:
        Provider instance

    Raises:
        ValidationError: If the name is unknown or the configuration is invalid
    """
    try:
        provider_class, configuration_class = PROVIDERS[name.lower()]
    except KeyError:
        raise ValidationError(
            f"Unknown provider: {name}",
            data={"available": sorted(PROVIDERS)},
        ) from None

    if isinstance(configuration, Mapping):
        try:
            configuration = configuration_class.from_dict(configuration)
        except ValueError as e:
            raise ValidationError(str(e), data={"provider": name}) from e
    elif not isinstance(configuration, configuration_class):
        raise ValidationError(
            f"Expected {configuration_class.__name__} for provider {name}",
            data={"provider": name},
        )

    logger.debug("Creating provider %s", name, extra={"provider": name})
    return provider_class(configuration)
