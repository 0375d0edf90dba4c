BASE_MAIN = 2  # radix of lists built from decimal text
BASE_EXTRA = 3  # radix produced by change_scale
RECORD_BOOK_NUMBER = 4315

DECIMAL_PATTERN = r"[0-9]+"

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVEL_ENV = "DIGITLIST_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
