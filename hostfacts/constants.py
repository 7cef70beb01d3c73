"""
Core application constants.

Centralizes sysctl names, fact names and configuration defaults.
"""

# Application Identifiers
APP_NAME = "hostfacts"
DATA_DIR_ENV_VAR = "HOSTFACTS_DATA_DIR"

# Sysctl Names
SYSCTL_LOGICAL_CPU_MAX = "hw.logicalcpu_max"
SYSCTL_PHYSICAL_CPU_MAX = "hw.physicalcpu_max"
SYSCTL_CPU_BRAND_STRING = "machdep.cpu.brand_string"

# Buffer Sizes (bytes)
DEFAULT_BRAND_STRING_BUFFER_SIZE = 256

# Fact Names
FACT_PROCESSORS = "processors"
FACT_PROCESSOR_COUNT = "processorcount"
FACT_PHYSICAL_PROCESSOR_COUNT = "physicalprocessorcount"
FACT_PROCESSOR = "processor"

# Backends
BACKEND_AUTO = "auto"
BACKEND_LIBC = "libc"
BACKEND_PSUTIL = "psutil"
BACKENDS = (BACKEND_AUTO, BACKEND_LIBC, BACKEND_PSUTIL)

# Default Configuration Values
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_BACKEND = BACKEND_AUTO
DEFAULT_JSON_INDENT = 2
