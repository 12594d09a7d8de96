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

import ipaddress
import logging
import os
import re

import cryptography.exceptions
import dns.exception
import dns.name
import packaging.specifiers
import packaging.version

from cryptography import x509
from cryptography.hazmat.primitives import serialization

import wkconfig.exceptions

logger = logging.getLogger(__name__)

REGEX_LABEL = r"[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
REGEX_PREFIX = r"[0-9]{1,3}"
REGEX_VERSION = r"v?[0-9]+\.[0-9]+(?:\.[0-9]+)?"

def get_default(value, default=None):
    if value is None:
        return default

    return value

def get_error(err):
    info = {
        "type" : err.__class__.__name__,
        "message" : str(err)
    }

    if hasattr(err, "kind"):
        info["kind"] = err.kind

    return info

def check_cidr(value):
    if not isinstance(value, str):
        return False

    (address, separator, prefix) = value.partition("/")

    if separator == "" \
            or re.fullmatch(REGEX_PREFIX, prefix) is None:
        return False

    try:
        # Host bits may be set, as in "192.168.1.0/16".
        ipaddress.ip_network(value, strict=False)

    except ValueError as err:
        logger.debug("%s: %s", value, err)

        return False

    return True

def check_ipv4(value):
    if not isinstance(value, str):
        return False

    try:
        ipaddress.IPv4Address(value)

    except ValueError:
        return False

    return True

def check_domain_name(value):
    if not isinstance(value, str) \
            or len(value) == 0:
        return False

    try:
        dns.name.from_text(value)

    except dns.exception.DNSException as err:
        logger.debug("%s: %s", value, err)

        return False

    if value.endswith("."):
        value = value[:-1]

    labels = value.split(".")

    for label in labels:
        if re.fullmatch(REGEX_LABEL, label) is None:
            return False

    # A numeric top-level label would make "192.1680.1.0" a domain name.
    if labels[-1].isdigit():
        return False

    return True

def check_version(value, specifier):
    if not isinstance(value, str):
        return False

    # PEP 440 also accepts "1.14.1.5" or "1.14.1-1" (post-release).
    if re.fullmatch(REGEX_VERSION, value) is None:
        return False

    try:
        version = packaging.version.Version(value)

    except packaging.version.InvalidVersion:
        return False

    return version in packaging.specifiers.SpecifierSet(specifier)

def check_file(path):
    return os.path.isfile(path)

def _get_public_bytes(public_key):
    return public_key.public_bytes(
        serialization.Encoding.DER,
        serialization.PublicFormat.SubjectPublicKeyInfo
    )

def check_key_pair(certificate_file, private_key_file):
    with open(certificate_file, "rb") as fd:
        certificate_data = fd.read()

    with open(private_key_file, "rb") as fd:
        private_key_data = fd.read()

    try:
        certificate = x509.load_pem_x509_certificate(certificate_data)
        private_key = serialization.load_pem_private_key(private_key_data, password=None)

    except (ValueError, TypeError, cryptography.exceptions.UnsupportedAlgorithm) as err:
        logger.debug("(certificate:%s, private-key:%s) %s", certificate_file, private_key_file, err)

        return False

    return _get_public_bytes(certificate.public_key()) == _get_public_bytes(private_key.public_key())

def get_mapping(document, key, path):
    value = document.get(key)

    if value is None:
        return {}

    if not isinstance(value, dict):
        raise wkconfig.exceptions.InvalidSpec(f"'{path}' is invalid.")

    return value

def get_list(document, key, path):
    value = document.get(key)

    if value is None:
        return []

    if not isinstance(value, list):
        raise wkconfig.exceptions.InvalidSpec(f"'{path}' is invalid.")

    return value

def get_string(document, key, path):
    value = document.get(key)

    if value is None:
        return ""

    if not isinstance(value, str):
        raise wkconfig.exceptions.InvalidSpec(f"{value}: invalid value type for '{path}'")

    return value

def get_integer(document, key, path):
    value = document.get(key)

    if value is None:
        return

    if not isinstance(value, int) \
            or isinstance(value, bool):
        raise wkconfig.exceptions.InvalidSpec(f"{value}: invalid value type for '{path}'")

    return value

def check_keys(document, keys, path):
    for key in document:
        if key not in keys:
            raise wkconfig.exceptions.InvalidSpec(f"{path}.{key}: this key is invalid.")

def raise_file_not_found(path, field):
    raise wkconfig.exceptions.FileNotFound(f"no file found at path: \"{path}\" for field: \"{field}\"")
