#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import txaio
txaio.use_twisted()

from hosttrie.node import Node, WILDCARD  # noqa
from hosttrie.trie import Trie, MULTI_LEVEL  # noqa

__doc__ = """hosttrie is an embeddable matching engine for dot-delimited keys
such as hostnames, with exact, single-level (*) and multi-level (+) wildcard
patterns."""

__version__ = '0.1.0'

__all__ = ('Node', 'Trie', 'WILDCARD', 'MULTI_LEVEL', '__version__')
