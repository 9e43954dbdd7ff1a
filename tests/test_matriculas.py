"""Testes de matrículas: serviço, rotas e o script de expiração."""

from datetime import date, timedelta

import pytest

import expirar_matriculas
from akdemia.enums import StatusMatricula
from akdemia.exceptions import ConflictError, InvalidInputError, NotFoundError
from akdemia.models.plano import Plano
from akdemia.schemas.matricula import MatriculaCreate
from akdemia.services.aluno_service import AlunoService
from akdemia.services.matricula_service import MatriculaService, expirar_vencidas

PREFIXO = "/api/v1/matriculas"


@pytest.fixture
def plano(db):
    plano = Plano(nome="Mensal", valor=89.9, duracao_dias=30)
    db.add(plano)
    db.commit()
    db.refresh(plano)
    return plano


@pytest.fixture
def aluno(db, novo_aluno):
    return AlunoService(db).criar(novo_aluno(1))


@pytest.fixture
def service(db):
    return MatriculaService(db)


def test_criar_matricula_deriva_datas_do_plano(service, aluno, plano):
    matricula = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))

    assert matricula.status == StatusMatricula.ATIVA
    assert matricula.data_inicio == date.today()
    assert matricula.data_fim == date.today() + timedelta(days=30)
    assert matricula.vencida is False
    assert matricula.nome_aluno == aluno.nome
    assert matricula.nome_plano == "Mensal"


def test_matricula_aparece_na_leitura_completa_do_aluno(db, service, aluno, plano):
    matricula = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))

    assert AlunoService(db).buscar_por_id(aluno.id).matriculas_ids == [matricula.id]


def test_segunda_matricula_ativa_gera_conflito(service, aluno, plano):
    service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))

    with pytest.raises(ConflictError):
        service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))


def test_matricula_exige_aluno_e_plano_ativos(db, service, aluno, plano):
    with pytest.raises(NotFoundError):
        service.criar(MatriculaCreate(aluno_id=999, plano_id=plano.id))

    AlunoService(db).desativar(aluno.id)
    with pytest.raises(NotFoundError):
        service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))


def test_matricula_com_periodo_invertido(service, aluno, plano):
    with pytest.raises(InvalidInputError):
        service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id,
                                      data_inicio=date(2024, 2, 1), data_fim=date(2024, 1, 1)))


def test_matricula_com_fim_no_passado_esta_vencida(service, aluno, plano):
    matricula = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id,
                                              data_inicio=date(2020, 1, 1), data_fim=date(2020, 1, 31)))

    assert matricula.vencida is True


def test_alterar_status(service, aluno, plano):
    matricula = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))

    suspensa = service.alterar_status(matricula.id, StatusMatricula.SUSPENSA)
    assert suspensa.status == StatusMatricula.SUSPENSA

    with pytest.raises(ConflictError):
        service.alterar_status(matricula.id, StatusMatricula.SUSPENSA)

    nova = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id))
    with pytest.raises(ConflictError):
        service.alterar_status(matricula.id, StatusMatricula.ATIVA)
    assert service.buscar_por_id(nova.id).status == StatusMatricula.ATIVA


def test_expirar_vencidas(db, service, aluno, plano, novo_aluno):
    vencida = service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id,
                                            data_inicio=date(2024, 1, 1), data_fim=date(2024, 1, 31)))
    outro = AlunoService(db).criar(novo_aluno(2))
    vigente = service.criar(MatriculaCreate(aluno_id=outro.id, plano_id=plano.id,
                                            data_inicio=date(2024, 1, 15), data_fim=date(2024, 3, 15)))

    simuladas = expirar_vencidas(db, date(2024, 2, 1), dry_run=True)
    assert [m.id for m in simuladas] == [vencida.id]
    assert service.buscar_por_id(vencida.id).status == StatusMatricula.ATIVA

    expiradas = expirar_vencidas(db, date(2024, 2, 1))
    assert [m.id for m in expiradas] == [vencida.id]
    assert service.buscar_por_id(vencida.id).status == StatusMatricula.VENCIDA
    assert service.buscar_por_id(vigente.id).status == StatusMatricula.ATIVA


def test_script_expirar_matriculas(session_factory, service, aluno, plano):
    service.criar(MatriculaCreate(aluno_id=aluno.id, plano_id=plano.id,
                                  data_inicio=date(2024, 1, 1), data_fim=date(2024, 1, 31)))

    assert expirar_matriculas.main(["--data", "2024-02-01", "--dry-run"], session_factory=session_factory) == 1
    assert expirar_matriculas.main(["--data", "2024-02-01"], session_factory=session_factory) == 1
    assert expirar_matriculas.main(["--data", "2024-02-01"], session_factory=session_factory) == 0


def test_rotas_de_matricula(client):
    aluno = client.post("/api/v1/alunos", json={
        "nome": "José Moreira", "email": "jose.moreira@email.com", "cpf": "11777777777",
        "telefone": "12345678903", "tipo": "ALUNO"
    }).json()
    plano = client.post("/api/v1/planos", json={"nome": "Trimestral", "valor": 239.9, "duracao_dias": 90}).json()

    criada = client.post(PREFIXO, json={"aluno_id": aluno["id"], "plano_id": plano["id"],
                                        "data_inicio": "2024-01-01"})
    assert criada.status_code == 201
    assert criada.json()["data_fim"] == "2024-03-31"
    assert criada.json()["vencida"] is True

    repetida = client.post(PREFIXO, json={"aluno_id": aluno["id"], "plano_id": plano["id"]})
    assert repetida.status_code == 409

    matricula_id = criada.json()["id"]
    assert client.get(f"{PREFIXO}/{matricula_id}").json()["nome_plano"] == "Trimestral"
    assert len(client.get(PREFIXO, params={"aluno_id": aluno["id"]}).json()) == 1
    assert client.get(PREFIXO, params={"status": "CANCELADA"}).json() == []

    cancelada = client.patch(f"{PREFIXO}/{matricula_id}/status", json={"status": "CANCELADA"})
    assert cancelada.status_code == 200
    assert cancelada.json()["status"] == "CANCELADA"

    assert client.get(f"{PREFIXO}/999").status_code == 404
    assert client.patch(f"{PREFIXO}/{matricula_id}/status", json={"status": "INEXISTENTE"}).status_code == 400
    assert client.get("/api/v1/alunos/sem-matricula").json() == []
