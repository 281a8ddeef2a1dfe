"""
# Yapp: config.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Loading of replacement rules from a YAML configuration file.

The file is a single mapping from pattern to replacement, e.g.
````
'(c)': '©'
'--': '–'
'{{author}}': Jane Doe
````
Rules are registered in document order.
A pattern given twice keeps the last replacement.
A `null` replacement stands for the empty string.

Configuration problems are never fatal:
they produce a warning and the rules concerned (or all rules) are dropped.
"""

import os
import warnings
from typing import Any, Optional

import yaml

from yapp.constants import CONFIG_FILE_NAMES
from yapp.exceptions import EmptyPatternException
from yapp.rules import RuleSet
from yapp.utilities import none_to_empty_string


def find_config_file(directory: str = os.curdir) -> Optional[str]:
    for config_file_name in CONFIG_FILE_NAMES:
        config_file_path = os.path.join(directory, config_file_name)
        if os.path.isfile(config_file_path):
            return config_file_path

    return None


def build_rule_set(config: Any, config_file_name: str, verbose_mode_enabled: bool = False) -> RuleSet:
    rule_set = RuleSet(verbose_mode_enabled)

    if config is None:
        rule_set.commit()
        return rule_set

    if not isinstance(config, dict):
        warnings.warn(
            f'warning: `{config_file_name}`: expected a mapping from pattern to replacement, '
            f'got {type(config).__name__}; no replacements will be applied'
        )
        rule_set.commit()
        return rule_set

    for pattern, replacement in config.items():
        replacement = none_to_empty_string(replacement)

        if not isinstance(pattern, str) or not isinstance(replacement, str):
            warnings.warn(
                f'warning: `{config_file_name}`: skipping rule {pattern!r} --> {replacement!r} '
                f'(pattern and replacement must be strings; quote them in YAML)'
            )
            continue

        try:
            rule_set.add_rule(pattern, replacement)
        except EmptyPatternException:
            warnings.warn(f'warning: `{config_file_name}`: skipping rule with empty pattern')

    rule_set.commit()

    return rule_set


def load_rule_set(config_file_name: Optional[str] = None, verbose_mode_enabled: bool = False) -> RuleSet:
    """
    Load a rule set from a configuration file.

    If `config_file_name` is None, the file is looked up in the working directory
    under the names in CONFIG_FILE_NAMES. If no file is found, or the file cannot be read or parsed,
    an empty rule set is returned.
    """
    if config_file_name is None:
        config_file_name = find_config_file()
        if config_file_name is None:
            return RuleSet.from_mapping({}, verbose_mode_enabled)

    try:
        with open(config_file_name, 'r', encoding='utf-8') as config_file:
            config = yaml.safe_load(config_file)
    except (OSError, UnicodeDecodeError) as error:
        warnings.warn(f'warning: cannot read `{config_file_name}` ({error}); no replacements will be applied')
        return RuleSet.from_mapping({}, verbose_mode_enabled)
    except yaml.YAMLError as error:
        warnings.warn(f'warning: cannot parse `{config_file_name}` ({error}); no replacements will be applied')
        return RuleSet.from_mapping({}, verbose_mode_enabled)

    return build_rule_set(config, config_file_name, verbose_mode_enabled)
