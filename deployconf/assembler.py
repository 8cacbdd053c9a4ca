"""Assembly of the configuration handed to the deployment tool."""

import logging
from typing import Any, Mapping, Optional

from deployconf import config, environment
from deployconf.credentials import CredentialProvider
from deployconf.evm import SigningTransport, TransportBuilder
from deployconf.models import EnvironmentContext, ResolvedConfiguration

logger = logging.getLogger(__name__)


def assemble(
    context: Optional[EnvironmentContext] = None,
    registry: config.NetworkRegistry = config.NETWORKS,
    provider: Optional[CredentialProvider] = None,
    test_settings: Optional[Mapping[str, Any]] = None,
) -> ResolvedConfiguration:
    """
    Build the resolved configuration.

    Every registered network gets its own deferred TransportBuilder; no
    credential is read here, so assembly does not fail on a missing secret.

    Args:
        context: Loaded environment (defaults to the process-wide context)
        registry: Networks to expose
        provider: Credential provider (defaults to one reading from context)
        test_settings: Test runner settings, passed through untouched
    """
    if context is None:
        context = environment.get_context()
    if provider is None:
        provider = CredentialProvider(context)
    if test_settings is None:
        test_settings = config.TEST_SETTINGS

    networks = {profile.name: TransportBuilder(profile, provider) for profile in registry}
    logger.debug("Assembled %d networks for environment %s", len(networks), context.name)

    return ResolvedConfiguration(
        environment=context.name,
        networks=networks,
        compiler_profile=config.COMPILER_PROFILE,
        test_settings=test_settings,
    )


def resolve_transport(name: str, context: Optional[EnvironmentContext] = None) -> SigningTransport:
    """Select a network and build its signing transport right away."""
    return assemble(context).select(name).build()
