# src/netrate/application/network_directory.py
"""
Network Directory - Networks and Provider Membership

Keyed-record store of networks and the providers participating in them.
Rate writes do not consult the directory; it is kept alongside the rate
engine for callers that need membership state.

Files that USE this module:
- netrate.app (wires the directory into the engine)

Files that this module USES:
- netrate.adapters.persistence.memory_store (KeyValueStore tables)
- netrate.domain (Network, NetworkMembership, Result, ErrorCode)
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from netrate.adapters.persistence.memory_store import KeyValueStore
from netrate.domain.errors import ErrorCode
from netrate.domain.models import MEMBERSHIP_ACTIVE, LogicalTime, Network, NetworkMembership
from netrate.domain.results import Result

logger = logging.getLogger(__name__)

NETWORKS_TABLE = "networks"
MEMBERSHIPS_TABLE = "network_providers"


class NetworkDirectory:
    """Networks and their provider memberships."""

    def __init__(self, store: KeyValueStore):
        self._networks = store.table(NETWORKS_TABLE)
        self._members = store.table(MEMBERSHIPS_TABLE)

    def create_network(self, network_id: str, name: str, description: str) -> Result:
        """
        Create an active network.

        Returns:
            Result.success(), or a failure with ErrorCode.NETWORK_EXISTS
        """
        network = Network(network_id=network_id, name=name, description=description)
        if not self._networks.insert((network_id,), network):
            logger.warning("Network %s already exists", network_id)
            return Result.failure(ErrorCode.NETWORK_EXISTS)

        logger.info("Created network %s (%s)", network_id, name)
        return Result.success()

    def get_network(self, network_id: str) -> Optional[Network]:
        return self._networks.get((network_id,))

    def add_provider_to_network(
        self, network_id: str, provider_id: str, tier: str, now: LogicalTime
    ) -> Result:
        """
        Add a provider to a network with status "active".

        Args:
            network_id: Existing network
            provider_id: Provider joining the network
            tier: Network tier such as "preferred"
            now: Current logical time, recorded as the join date

        Returns:
            Result.success(), or a failure with ErrorCode.NETWORK_NOT_FOUND
            or ErrorCode.PROVIDER_EXISTS
        """
        if not self._networks.contains((network_id,)):
            logger.warning("Cannot add provider %s: network %s not found", provider_id, network_id)
            return Result.failure(ErrorCode.NETWORK_NOT_FOUND)

        membership = NetworkMembership(
            network_id=network_id,
            provider_id=provider_id,
            join_date=now,
            tier=tier,
        )
        if not self._members.insert((network_id, provider_id), membership):
            logger.warning("Provider %s already in network %s", provider_id, network_id)
            return Result.failure(ErrorCode.PROVIDER_EXISTS)

        logger.info("Added provider %s to network %s (tier=%s)", provider_id, network_id, tier)
        return Result.success()

    def update_provider_status(self, network_id: str, provider_id: str, status: str) -> Result:
        """
        Replace a member's status, e.g. with "suspended".

        Returns:
            Result.success(), or a failure with ErrorCode.PROVIDER_NOT_FOUND
        """
        key = (network_id, provider_id)
        with self._members.locked(key):
            membership = self._members.get(key)
            if membership is None:
                logger.warning("Provider %s not found in network %s", provider_id, network_id)
                return Result.failure(ErrorCode.PROVIDER_NOT_FOUND)
            self._members.put(key, replace(membership, status=status))

        logger.info("Provider %s in network %s is now %s", provider_id, network_id, status)
        return Result.success()

    def get_provider_network_status(self, network_id: str, provider_id: str) -> Optional[NetworkMembership]:
        return self._members.get((network_id, provider_id))

    def is_provider_active_in_network(self, network_id: str, provider_id: str) -> bool:
        membership = self.get_provider_network_status(network_id, provider_id)
        return membership is not None and membership.status == MEMBERSHIP_ACTIVE
