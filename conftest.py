import os

import django


def pytest_configure(config):
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'nfa_simulator.tests.settings')
    django.setup()
