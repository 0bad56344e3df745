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

"""Configuration for immutable record types."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import PACKAGE_LOGGER_NAME, configure_split_stream_logging


@dataclass
class RecordConfig:
    """Library-wide settings for record types."""
    default_type_name: str = "Record"
    log_level: str = "WARNING"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls) -> 'RecordConfig':
        """Create configuration from environment variables."""
        return cls(
            default_type_name=os.getenv('IMMUTABLE_RECORD_DEFAULT_TYPE_NAME', 'Record'),
            log_level=os.getenv('IMMUTABLE_RECORD_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('IMMUTABLE_RECORD_PRINT_LEVEL', 'ERROR'),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            level=level,
            stderr_level=stderr_level,
            formatter=formatter,
            logger_name=PACKAGE_LOGGER_NAME,
        )


# Global configuration instance
record_config = RecordConfig()
