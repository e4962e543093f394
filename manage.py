#!/usr/bin/env python
"""
Django administration utility.

Standard idiomatic Django usage:

    DJANGO_SETTINGS_MODULE=lms.envs.test ./manage.py COMMAND ARGS...

Legacy usage:

    ./manage.py lms [--settings=test] COMMAND ARGS...
"""
# pylint: disable=wrong-import-order, wrong-import-position

import os
import sys
from argparse import ArgumentParser


def main():
    """
    Call the management command.

    Convert from legacy style into standard idiomatic django style if necessary.
    """
    env_settings_module = os.environ.get("DJANGO_SETTINGS_MODULE")

    if len(sys.argv) > 1 and sys.argv[1] == "lms":
        # LEGACY USAGE:
        # The first arg after 'manage.py' is the service variant. The '--settings'
        # flag names a module within lms.envs.
        manage_py = sys.argv[0]
        parse_settings_module = ArgumentParser()
        parse_settings_module.add_argument(
            '--settings',
            help="Which django settings module to use under lms.envs. If unspecified, will default to lms.envs.test.",
        )
        settings_arg, management_args = parse_settings_module.parse_known_args(sys.argv[2:])
        if settings_arg.settings:
            final_settings_module = f"lms.envs.{settings_arg.settings}"
        else:
            final_settings_module = env_settings_module or "lms.envs.test"
        final_args = [manage_py, *management_args]
    else:
        final_settings_module = env_settings_module or "lms.envs.test"
        final_args = sys.argv

    try:
        from django.core.management import execute_from_command_line
    except ImportError as import_error:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from import_error

    os.environ["DJANGO_SETTINGS_MODULE"] = final_settings_module
    execute_from_command_line(final_args)


if __name__ == "__main__":
    main()
