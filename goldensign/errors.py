# -*- coding: utf-8 -*-
"""
Erros nomeados da camada de dados.

"Não encontrado" não é erro: os getters do Registry devolvem None.
"""


class GoldenSignError(Exception):
    """Base de todos os erros do GoldenSign."""


class RegistryError(GoldenSignError):
    """Escrita recusada por violar uma regra do Registry."""


class UnknownEvent(RegistryError):
    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(f"Evento não encontrado: {event_id}")


class CapacityExceeded(RegistryError):
    def __init__(self, event_id, max_participants):
        self.event_id = event_id
        self.max_participants = max_participants
        super().__init__(
            f"Evento lotado: {event_id} já tem {max_participants} inscrições"
        )


class DuplicateEmail(RegistryError):
    def __init__(self, event_id, email):
        self.event_id = event_id
        self.email = email
        super().__init__(f"O email {email} já está inscrito no evento {event_id}")


class StorageFailure(GoldenSignError):
    """
    O armazenamento recusou a escrita, está indisponível ou guarda dados ilegíveis.

    É recuperável: o Registry desfaz a alteração em memória antes de propagar.
    """

    def __init__(self, message, key=None):
        self.key = key
        super().__init__(message)


class NothingToExport(GoldenSignError):
    """Não há eventos para exportar."""
