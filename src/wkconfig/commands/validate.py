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
import os
import sys

import click
import yaml

import wkconfig.commands
import wkconfig.default
import wkconfig.spec
import wkconfig.spec.git
import wkconfig.util

from wkconfig.sysexits import EX_OK, EX_NOINPUT, EX_DATAERR, EX_CONFIG

logger = logging.getLogger(__name__)

@wkconfig.commands.cli.command(add_help_option=False)
@click.option("-f", "--file", default=None, help="Cluster specification to validate.")
@click.option("--git", is_flag=True, default=False, help="Also check the git provider settings.")
def validate(file, git):
    if file is None:
        file = os.getenv(wkconfig.default.CONFIG_ENV, wkconfig.default.CONFIG)

    if not os.path.isfile(file):
        logger.error("(file:%s) cluster specification cannot be found.", file)
        sys.exit(EX_NOINPUT)

    try:
        document = wkconfig.spec.load(file)

    except (yaml.YAMLError, UnicodeDecodeError) as err:
        error = wkconfig.util.get_error(err)

        logger.error("(file:%s) %s: %s", file, error.get("type"), error.get("message"))
        sys.exit(EX_CONFIG)

    if not git \
            and isinstance(document, dict) \
            and wkconfig.spec.git.has_git_settings(document):
        logger.warning("(file:%s) git settings are present but were not checked; use --git.", file)

    (document, err) = wkconfig.spec.validate(document, git=git)

    if err is not None:
        logger.error("%s", err)
        sys.exit(EX_DATAERR)

    logger.info("(track:%s, clusterName:%s) cluster specification is valid.",
                wkconfig.spec.get_track(document), wkconfig.spec.get_clusterName(document))

    print(yaml.safe_dump(document, sort_keys=False), end="")

    sys.exit(EX_OK)
