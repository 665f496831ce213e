"""Marketplace connection status.

The storefront does not sync with external marketplaces yet; these are the
fixed status reports the admin panel shows for each supported channel.
"""

from datetime import UTC, datetime, timedelta

from storefront.errors import NotFoundError

_CHANNELS = {
    "amazon": {"products_synced": 1243, "last_sync_ago": timedelta(hours=1), "sync_status": "up-to-date"},
    "ebay": {"products_synced": 876, "last_sync_ago": timedelta(hours=3), "sync_status": "updates-available"},
}


def marketplace_status(marketplace: str) -> dict:
    channel = _CHANNELS.get((marketplace or "").lower())
    if channel is None:
        raise NotFoundError("Marketplace not found")

    return {
        "marketplace": marketplace.lower(),
        "connected": True,
        "products_synced": channel["products_synced"],
        "last_sync": datetime.now(UTC) - channel["last_sync_ago"],
        "sync_status": channel["sync_status"],
    }
