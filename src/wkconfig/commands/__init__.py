# BSD 3-Clause License
#
# Copyright (c) 2025, Jesús Daniel Colmenares Oviedo <DtxdF@disroot.org>
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this
#    list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# 3. Neither the name of the copyright holder nor the names of its
#    contributors may be used to endorse or promote products derived from
#    this software without specific prior written permission.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

import logging
import logging.config
import os
import sys

import click
import pyaml_env

import wkconfig.default
import wkconfig.environment
import wkconfig.util

from wkconfig.sysexits import EX_CONFIG

logger = logging.getLogger(__name__)

@click.group(add_help_option=False)
@click.version_option()
@click.option("-e", "--env-file", default=wkconfig.default.ENV_FILE, help="Specify an alternate file to load environment variables.")
@click.option("--log-config", default=None, help="YAML file with a logging configuration (dictConfig schema).")
def cli(*args, **kwargs):
    """
    Validate a cluster specification and fill in its defaults before it is
    handed to the provisioning tooling.
    """

    _cli(*args, **kwargs)

def _cli(env_file, log_config):
    _cli_load_environment(env_file)
    _cli_load_log_config(log_config)

def _cli_load_environment(env_file):
    wkconfig.environment.init(env_file)

def _cli_load_log_config(log_config):
    if log_config is None:
        log_config = os.getenv(wkconfig.default.LOG_CONFIG_ENV, wkconfig.default.LOG_CONFIG)

    if log_config is None:
        return

    try:
        document = pyaml_env.parse_config(log_config, default_value="")

        if not isinstance(document, dict):
            raise ValueError(f"{log_config}: invalid logging configuration.")

        logging.config.dictConfig(document)

    except Exception as err:
        error = wkconfig.util.get_error(err)
        error_type = error.get("type")
        error_message = error.get("message")

        logger.error("%s: %s", error_type, error_message)

        sys.exit(EX_CONFIG)
