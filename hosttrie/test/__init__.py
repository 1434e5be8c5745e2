#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

from os import getcwd, chdir

from twisted.trial.unittest import TestCase as _TestCase


class TestCase(_TestCase):
    """
    A Trial TestCase that makes sure that it is in the same directory when it
    finishes as when it began.
    """
    def setUp(self):
        original_dir = getcwd()
        self.addCleanup(lambda: chdir(original_dir))
        return super(TestCase, self).setUp()
