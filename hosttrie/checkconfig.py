#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import os
import json

from collections import OrderedDict
from collections.abc import Mapping, Sequence

import yaml

from txaio import make_logger

from hosttrie.trie import Trie

__all__ = ('InvalidConfigException',
           'check_config',
           'check_config_file',
           'build_trie',
           'load_config_file')

LATEST_CONFIG_VERSION = 1
"""
The current rule set configuration version.
"""

log = make_logger()


class InvalidConfigException(Exception):
    pass


def check_dict_args(spec, config, msg):
    """
    Check the arguments of C{config} according to C{spec}.

    C{spec} is a dict, with the key mapping to the config and the value being a
    2-tuple, for which the first item being whether or not it is mandatory, and
    the second being a list of types of which the config item can be (an empty
    list allows any type).
    """
    if not isinstance(config, Mapping):
        raise InvalidConfigException("{} - invalid type for configuration item - expected dict, got {}".format(msg, type(config).__name__))

    for k in config:
        if k not in spec:
            raise InvalidConfigException("{} - encountered unknown attribute '{}'".format(msg, k))
        if spec[k][1]:
            valid_type = False
            for t in spec[k][1]:
                if isinstance(config[k], t):
                    # a string is a Sequence too, but never a valid one here
                    if t is Sequence:
                        if not isinstance(config[k], str):
                            valid_type = True
                            break
                    # bool is a subclass of int
                    elif t is int:
                        if not isinstance(config[k], bool):
                            valid_type = True
                            break
                    else:
                        valid_type = True
                        break
            if not valid_type:
                raise InvalidConfigException("{} - invalid type {} encountered for attribute '{}', must be one of ({})".format(msg, type(config[k]).__name__, k, ', '.join([x.__name__ for x in spec[k][1]])))

    mandatory_keys = [k for k in spec if spec[k][0]]
    for k in mandatory_keys:
        if k not in config:
            raise InvalidConfigException("{} - missing mandatory attribute '{}'".format(msg, k))


def check_rule(rule, index=None):
    """
    Check a single rule item.

    .. code-block:: yaml

        pattern: "*.example.com"
        value: 127.0.0.1
    """
    msg = "invalid rule {}".format(index) if index is not None else "invalid rule"
    check_dict_args({
        'pattern': (True, [str]),
        'value': (True, []),
    }, rule, msg)

    if not rule['pattern']:
        raise InvalidConfigException("{} - 'pattern' must not be empty".format(msg))


def check_config(config):
    """
    Check a rule set configuration.

    .. code-block:: yaml

        version: 1
        rules:
          - pattern: "+.foo.com"
            value: 10.0.0.1

    :param config: The configuration to check.
    :type config: dict
    """
    check_dict_args({
        'version': (False, [int]),
        'rules': (True, [Sequence]),
    }, config, "invalid rule set configuration")

    version = config.get('version', LATEST_CONFIG_VERSION)
    if version != LATEST_CONFIG_VERSION:
        raise InvalidConfigException("invalid configuration version {} - must be {}".format(version, LATEST_CONFIG_VERSION))

    for i, rule in enumerate(config['rules']):
        check_rule(rule, i)


def check_config_file(configfile):
    """
    Load and check a rule set configuration file.

    :param configfile: The file to check, either ``.json`` or ``.yaml``.
    :type configfile: str

    :returns: The checked configuration.
    :rtype: dict
    """
    configext = os.path.splitext(configfile)[1]
    configfile = os.path.abspath(configfile)

    if configext not in ['.json', '.yaml', '.yml']:
        raise InvalidConfigException("invalid configuration file extension '{}'".format(configext))

    with open(configfile, 'r') as infile:
        if configext == '.json':
            try:
                config = json.load(infile, object_pairs_hook=OrderedDict)
            except ValueError as e:
                raise InvalidConfigException("configuration file does not seem to be proper JSON ('{}')".format(e))
        else:
            try:
                config = yaml.safe_load(infile)
            except yaml.YAMLError as e:
                raise InvalidConfigException("configuration file does not seem to be proper YAML ('{}')".format(e))

    check_config(config)

    return config


def build_trie(config, trie=None):
    """
    Insert all rules of a (checked) configuration into a trie.

    :param config: A rule set configuration.
    :type config: dict
    :param trie: Trie to fill, a new one is created when not given.
    :type trie: hosttrie.trie.Trie

    :returns: The filled trie.
    :rtype: hosttrie.trie.Trie
    """
    if trie is None:
        trie = Trie()

    for rule in config['rules']:
        trie.insert(rule['pattern'], rule['value'])

    log.info("Loaded {count} rule(s) from configuration", log_category="HT200", count=len(config['rules']))

    return trie


def load_config_file(configfile, trie=None):
    """
    Load a rule set configuration file into a trie.
    """
    config = check_config_file(configfile)
    return build_trie(config, trie)
