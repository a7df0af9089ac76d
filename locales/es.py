"""Spanish strings for the public API."""

ES_STRINGS = {
    # === STANDINGS ===
    "standings_not_found": "No se pudieron obtener las clasificaciones",
    "standings_network_error": (
        "Error de conexión al obtener las clasificaciones. "
        "Verifica tu conexión a internet."
    ),
    "standings_rate_limited": "Servicio temporalmente no disponible. Inténtalo más tarde.",
    "standings_timeout": "Tiempo de espera agotado. Por favor, inténtalo de nuevo.",
    "standings_internal_error": "Error interno al cargar las clasificaciones",

    # === NEWS ===
    "rumor_not_analyzed": "No se pudo analizar este rumor automáticamente.",
    "rumor_no_description": "Sin descripción",
}
