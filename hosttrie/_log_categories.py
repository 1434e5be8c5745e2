#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

# The log categories
log_categories = {
    # HT1XX - trie operations
    "HT100": "Inserted pattern '{pattern}' ({branches} branch(es))",
    "HT101": "Removed pattern '{pattern}'",
    "HT102": "Pattern '{pattern}' not present, nothing removed",
    "HT103": "Compaction detached {count} node(s) up to '{label}'",

    # HT2XX - configuration
    "HT200": "Loaded {count} rule(s) from configuration",

    # HT3XX - ignored input
    "HT301": "Ignoring empty pattern (value={value!r})",
}

log_keys = log_categories.keys()
