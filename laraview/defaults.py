"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These can be overridden in config/view.py, config/app.py or .env
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# Decorated (Blade) dialect is checked before the plain dialect
DEFAULT_BLADE_EXTENSION = '.blade.html'
DEFAULT_VIEW_EXTENSION = '.html'

# Reserved key in the composer configuration, called for every view
SHARED_COMPOSER_KEY = 'shared'

# Template bindings that view data can never shadow
RESERVED_BINDINGS = ('view', 'loop')

DEFAULT_TEMPLATE_ENCODING = 'utf-8'

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_ENV = 'production'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
