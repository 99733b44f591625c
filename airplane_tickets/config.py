from decouple import config

LOG_DIR = config("TICKETS_LOG_DIR", default="logs")
LOG_LEVEL = config("TICKETS_LOG_LEVEL", default="INFO")
