"""English strings (logs, admin tooling)."""

EN_STRINGS = {
    # === STANDINGS ===
    "standings_not_found": "Standings could not be retrieved",
    "standings_network_error": "Connection error while fetching standings. Check your internet connection.",
    "standings_rate_limited": "Service temporarily unavailable. Please try again later.",
    "standings_timeout": "Request timed out. Please try again.",
    "standings_internal_error": "Internal error while loading standings",

    # === NEWS ===
    "rumor_not_analyzed": "This rumor could not be analyzed automatically.",
    "rumor_no_description": "No description",
}
