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

import enum
import logging

import pyaml_env

import wkconfig.default
import wkconfig.environment
import wkconfig.exceptions
import wkconfig.spec.eks
import wkconfig.spec.footloose
import wkconfig.spec.git
import wkconfig.spec.sealed_secrets
import wkconfig.spec.ssh
import wkconfig.spec.wks
import wkconfig.util

logger = logging.getLogger(__name__)

class TrackTypes(enum.Enum):
    EKS = "eks"
    WKS_SSH = "wks-ssh"
    WKS_FOOTLOOSE = "wks-footloose"

class ValidationStates(enum.Enum):
    LOADED = "Loaded"
    GLOBALS_CHECKED = "GlobalsChecked"
    GIT_CHECKED = "GitChecked"
    SECRETS_CHECKED = "SecretsChecked"
    TRACK_CHECKED = "TrackChecked"
    DEFAULTED = "Defaulted"
    REJECTED = "Rejected"

def load(file):
    document = pyaml_env.parse_config(file, default_value="")

    return wkconfig.util.get_default(document, {})

def loads(data):
    if len(data.strip()) == 0:
        return {}

    document = pyaml_env.parse_config(data=data, default_value="")

    return wkconfig.util.get_default(document, {})

def get_track(document):
    return document.get("track")

def get_clusterName(document):
    return document.get("clusterName")

def validate(document, git=False, environ=None):
    """
    Validate a cluster specification and fill in its defaults.

    Validators run in a fixed order and the first failing rule stops the
    chain. On success the same document is returned, defaulted in place,
    together with `None`; on failure `None` is returned together with the
    `wkconfig.exceptions.SpecError` that was raised.

    `git` enables the git settings check. `environ` replaces `os.environ`
    when computing the user and home directory defaults.
    """

    state = ValidationStates.LOADED

    try:
        validate_globals(document)

        state = _transition(state, ValidationStates.GLOBALS_CHECKED)

        if git:
            wkconfig.spec.git.validate(document)

        state = _transition(state, ValidationStates.GIT_CHECKED)

        wkconfig.spec.sealed_secrets.validate(document)

        state = _transition(state, ValidationStates.SECRETS_CHECKED)

        validate_trackConfig(document)

        state = _transition(state, ValidationStates.TRACK_CHECKED)

    except wkconfig.exceptions.SpecError as err:
        _transition(state, ValidationStates.REJECTED)

        logger.debug("(kind:%s) %s", err.kind, err)

        return (None, err)

    set_defaults(document, environ)

    _transition(state, ValidationStates.DEFAULTED)

    return (document, None)

def _transition(current, next):
    logger.debug("(state:%s) -> %s", current.value, next.value)

    return next

def validate_globals(document):
    if not isinstance(document, dict):
        raise wkconfig.exceptions.InvalidSpec("The document is invalid.")

    validate_track(document)
    validate_dockerIOUser(document)
    validate_dockerIOPasswordFile(document)
    validate_clusterName(document)

def validate_track(document):
    track = wkconfig.util.get_string(document, "track", "track")

    if len(track) == 0:
        raise wkconfig.exceptions.MissingField("track must be specified")

    if track not in [t.value for t in TrackTypes]:
        raise wkconfig.exceptions.InvalidEnum("track must be one of: 'eks', 'wks-ssh', or 'wks-footloose'")

def validate_dockerIOUser(document):
    dockerIOUser = wkconfig.util.get_string(document, "dockerIOUser", "dockerIOUser")

    if len(dockerIOUser) == 0:
        raise wkconfig.exceptions.MissingField("dockerIOUser must be specified")

def validate_dockerIOPasswordFile(document):
    dockerIOPasswordFile = wkconfig.util.get_string(document, "dockerIOPasswordFile", "dockerIOPasswordFile")

    if len(dockerIOPasswordFile) == 0:
        raise wkconfig.exceptions.MissingField("dockerIOPasswordFile must be specified")

def validate_clusterName(document):
    wkconfig.util.get_string(document, "clusterName", "clusterName")

def validate_trackConfig(document):
    track = get_track(document)

    if track == TrackTypes.EKS.value:
        eksConfig = wkconfig.util.get_mapping(document, "eksConfig", "eksConfig")

        wkconfig.spec.eks.validate(eksConfig)

    elif track == TrackTypes.WKS_SSH.value \
            or track == TrackTypes.WKS_FOOTLOOSE.value:
        wksConfig = wkconfig.util.get_mapping(document, "wksConfig", "wksConfig")

        wkconfig.spec.wks.validate(wksConfig)

        if track == TrackTypes.WKS_SSH.value:
            sshConfig = wkconfig.util.get_mapping(wksConfig, "sshConfig", "wksConfig.sshConfig")

            wkconfig.spec.ssh.validate(sshConfig)

        else:
            footlooseConfig = wkconfig.util.get_mapping(wksConfig, "footlooseConfig", "wksConfig.footlooseConfig")

            wkconfig.spec.footloose.validate(footlooseConfig)

    else:
        raise wkconfig.exceptions.InvalidEnum("track must be one of: 'eks', 'wks-ssh', or 'wks-footloose'")

def set_defaults(document, environ=None):
    set_global_defaults(document, environ)

    track = get_track(document)

    if track == TrackTypes.EKS.value:
        wkconfig.spec.eks.set_defaults(document["eksConfig"])

    elif track == TrackTypes.WKS_SSH.value:
        wkconfig.spec.ssh.set_defaults(document["wksConfig"]["sshConfig"], environ)

def set_global_defaults(document, environ=None):
    if not document.get("clusterName"):
        user = wkconfig.environment.get_user(environ)

        document["clusterName"] = f"{wkconfig.default.CLUSTER_NAME_PREFIX}{user}"
