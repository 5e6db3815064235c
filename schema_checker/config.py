# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime configuration for the schema checker."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_LOG_FORMAT, configure_split_stream_logging

ENV_PREFIX = "SCHEMA_CHECKER_"


@dataclass
class CheckerConfig:
    """Configuration for validation runs and the lint tooling."""
    max_depth: int = 100
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True

    @classmethod
    def from_env(cls) -> 'CheckerConfig':
        """Create configuration from environment variables."""
        return cls(
            max_depth=int(os.getenv(f'{ENV_PREFIX}MAX_DEPTH', '100')),
            log_level=os.getenv(f'{ENV_PREFIX}LOG_LEVEL', 'INFO'),
            print_level=os.getenv(f'{ENV_PREFIX}PRINT_LEVEL', 'ERROR'),
            cache_enabled=os.getenv(f'{ENV_PREFIX}CACHE_ENABLED', 'true').lower() == 'true',
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
        return configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)


# Global configuration instance
checker_config = CheckerConfig.from_env()
