import os

# Separates every token in the serialized output, including the trailing one.
SEPARATOR = " "

LOG_LEVEL = os.environ.get("UTM_LOG_LEVEL", "WARNING").upper()
