import enum


class Role(str, enum.Enum):
    coordenador = "coordenador"
    supervisor = "supervisor"
    admin = "admin"

    @property
    def is_privileged(self) -> bool:
        # supervisor e admin valem como o mesmo papel privilegiado
        return self in (Role.supervisor, Role.admin)


class AuthType(str, enum.Enum):
    local = "local"
    google = "google"


class EventType(str, enum.Enum):
    evento = "Evento"
    acao_pontual = "Ação Pontual"
    projeto_institucional = "Projeto Institucional"
    projeto_pedagogico = "Projeto Pedagógico"
    expedicao_pedagogica = "Expedição Pedagógica"
    formacao = "Formação"
    festa = "Festa"


class EventStatus(str, enum.Enum):
    pending = "pending"
    approved = "approved"
    rejected = "rejected"


def enum_values(enum_cls):
    return [member.value for member in enum_cls]
