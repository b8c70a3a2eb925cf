"""User-facing messages.

Note: Keep them here so controllers, services and tests agree on the wording.
"""

INVALID_TIPO_MESSAGE = 'Tipo inválido. Deve ser "entrada" ou "saida".'
EMPLOYEE_NOT_FOUND_MESSAGE = "Funcionário não encontrado."
INTERNAL_ERROR_MESSAGE = "Internal Server Error"
DELETE_SUCCESS_TEMPLATE = (
    "Pontos registrados no dia {data} para o funcionário de CPF {cpf} foram excluídos com sucesso."
)
