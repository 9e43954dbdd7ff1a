import logging
import argparse
from datetime import date, datetime

# --- Importações de todos os modelos ---
from akdemia.database import SessionLocal
from akdemia.models.aluno import Aluno  # noqa: F401
from akdemia.models.avaliacao import Avaliacao  # noqa: F401
from akdemia.models.exercicio import Exercicio, ExercicioTreino  # noqa: F401
from akdemia.models.instrutor import Instrutor  # noqa: F401
from akdemia.models.matricula import Matricula  # noqa: F401
from akdemia.models.plano import Plano  # noqa: F401
from akdemia.models.treino import Treino  # noqa: F401
from akdemia.services.matricula_service import expirar_vencidas
# ------------------------------------------------------


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Marca como VENCIDA as matrículas ativas cujo período terminou')
    parser.add_argument('--data', type=lambda s: datetime.strptime(s, '%Y-%m-%d').date(),
                        help='Data de referência no formato YYYY-MM-DD (padrão: hoje)')
    parser.add_argument('--dry-run', action='store_true', help='Apenas lista, sem gravar')
    return parser.parse_args(argv)


def main(argv=None, session_factory=SessionLocal):
    """
    Expira as matrículas vencidas. Retorna a quantidade de matrículas encontradas.
    """
    args = parse_args(argv)
    data_referencia = args.data or date.today()
    modo = "SIMULAÇÃO" if args.dry_run else "EXECUÇÃO"
    logging.info(f"{modo}: expirando matrículas com fim anterior a {data_referencia.strftime('%d/%m/%Y')}")

    db = session_factory()
    try:
        vencidas = expirar_vencidas(db, data_referencia, dry_run=args.dry_run)
        for matricula in vencidas:
            logging.info(f"-> VENCIDA: matrícula {matricula.id} | {matricula.aluno.nome} | fim {matricula.data_fim}")

        if vencidas:
            logging.info(f"SUCESSO: {len(vencidas)} matrícula(s) {'seriam expiradas' if args.dry_run else 'expiradas'}.")
        else:
            logging.info("Nenhuma matrícula vencida encontrada.")
        return len(vencidas)
    finally:
        db.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    main()
