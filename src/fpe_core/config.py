"""
src/fpe_core/config.py
Constantes de Configuración.
Parámetros de presentación y de logging compartidos por toda la librería.
"""

# =============================================================================
# PRESENTACIÓN (to_display_string / repr)
# =============================================================================
ARROW_SEPARATOR   = " -> "     # 1 -> 2 -> 3
BRACKET_SEPARATOR = ", "       # [1, 2, 3]
EMPTY_DISPLAY     = "[]"       # Lista vacía en ambos estilos

STYLE_ARROW       = "arrow"
STYLE_BRACKET     = "bracket"
DISPLAY_STYLES    = (STYLE_ARROW, STYLE_BRACKET)
DEFAULT_DISPLAY_STYLE = STYLE_ARROW

# Safety limit para repr() en logs y consola
REPR_LIMIT        = 10
REPR_EMPTY        = "Nil"

# =============================================================================
# LOGGING
# =============================================================================
LOGGER_NAME       = "fpe_core"
LOG_LEVEL_ENV     = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT        = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT   = "%Y-%m-%d %H:%M:%S"
