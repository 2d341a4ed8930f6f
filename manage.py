#!/usr/bin/env python
"""
Command line entry point for the PharmaX backend.

Points Django at ``pharmax.settings`` and hands over to the management
utility: ``migrate``, ``runserver`` (defaults to ``0.0.0.0:$PORT``),
``seed_data`` and the rest.
"""
import os
import sys


def main() -> None:
    """Run administrative tasks for the PharmaX project."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'pharmax.settings')
    try:
        from django.core.management import execute_from_command_line  # type: ignore
    except ImportError as exc:
        raise ImportError(
            "Couldn't import Django. Are you sure it's installed and "
            "available on your PYTHONPATH environment variable? Did you "
            "forget to activate a virtual environment?"
        ) from exc
    execute_from_command_line(sys.argv)


if __name__ == '__main__':
    main()
