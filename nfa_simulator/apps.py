from django.apps import AppConfig


class NfaSimulatorConfig(AppConfig):
    name = 'nfa_simulator'
    verbose_name = 'NFA simulator'
