#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import click

__all__ = ('hl', 'hllabel', 'hlval')


def hl(text, bold=False, color='yellow'):
    """
    Returns highlighted text.
    """
    if not isinstance(text, str):
        text = '{}'.format(text)
    return click.style(text, fg=color, bold=bold)


def hllabel(label, is_wildcard=False):
    if is_wildcard:
        return hl(label, color='magenta', bold=True)
    return hl(label, color='yellow', bold=True)


def hlval(val, color='white'):
    return hl('{}'.format(val), color=color, bold=True)
