from chefflow.logger import setup_logging, init_logger
from chefflow.config import get_config_registry, get_system_config

# Route every log record to stderr before anything logs
setup_logging()

# Initialize configuration system
config_registry = get_config_registry()
config = get_system_config(config_registry)

# Initialize logger
logger = init_logger(config)
