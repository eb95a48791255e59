"""Application constants."""

STAGES = (
    "ingest",
    "estimates",
)
EXIT_SUCCESS = 0
EXIT_PARTIAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "run_id",
    "stage",
    "source",
    "event",
    "status",
    "row_number",
    "record_id",
    "rows_in",
    "rows_out",
    "error_code",
    "message",
)

# Normalised header names as they appear in the Data Axle style exports.
COLUMN_ADDRESS = "address"
COLUMN_CITY = "city"
COLUMN_STATE = "state"
COLUMN_FIRST_NAME = "first name"
COLUMN_LAST_NAME = "last name"
COLUMN_PHONE = "phone number combined"
COLUMN_ZIP = "zip code"
COLUMN_COUNTY = "county"
COLUMN_METRO_AREA = "metro area"
COLUMN_LATITUDE = "latitude"
COLUMN_LONGITUDE = "longitude"
COLUMN_AGE_RANGE = "age range"
COLUMN_GENDER = "adult gender"
COLUMN_OWN_RENT = "own / rent"
COLUMN_HOUSEHOLD_INCOME = "estimated household income"
COLUMN_HOME_VALUE = "estimated home value"
COLUMN_WEALTH = "wealth finder"
COLUMN_FIPS = "fips"

KNOWN_COLUMNS = (
    COLUMN_ADDRESS,
    COLUMN_CITY,
    COLUMN_STATE,
    COLUMN_FIRST_NAME,
    COLUMN_LAST_NAME,
    COLUMN_PHONE,
    COLUMN_ZIP,
    COLUMN_COUNTY,
    COLUMN_METRO_AREA,
    COLUMN_LATITUDE,
    COLUMN_LONGITUDE,
    COLUMN_AGE_RANGE,
    COLUMN_GENDER,
    COLUMN_OWN_RENT,
    COLUMN_HOUSEHOLD_INCOME,
    COLUMN_HOME_VALUE,
    COLUMN_WEALTH,
    COLUMN_FIPS,
)

WGS84_EPSG = 4326
MAX_FAILURE_SAMPLES = 50
