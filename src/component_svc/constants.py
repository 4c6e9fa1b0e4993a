"""Reserved identifiers shared across the component service."""

# Internal application / source name. Its component list is bookkeeping only
# and its locale file is the shared base merged into every other application.
SECRETPAD = "secretpad"

# Built-in data ingestion node
READ_DATA = "read-data"
DATA_TABLE = "data-table"

DEFAULT_I18N_LOCATION = "./config/i18n"
