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

CONFIG = "config.yaml"
ENV_FILE = ".env"
LOG_CONFIG = None
CONFIG_ENV = "WKCONFIG_CONFIG"
LOG_CONFIG_ENV = "WKCONFIG_LOG_CONFIG"
USER_ENV = "USER"
HOME_ENV = "HOME"
CLUSTER_NAME_PREFIX = "wk-"
CLUSTER_NAME_FALLBACK = "cluster"
EKS = {
    "kubernetesVersions" : ("1.14", "1.15"),
    "nodeGroup" : {
        "namePrefix" : "ng-",
        "instanceType" : "m5.large",
        "desiredCapacity" : 3
    }
}
WKS = {
    "kubernetesVersions" : ">=1.14.0,<1.16.0",
    "kubernetesVersionsLabel" : "1.14.x-1.15.x"
}
SSH = {
    "user" : "root",
    "keyFile" : "{HOME}/.ssh/id_rsa",
    "port" : 22
}
