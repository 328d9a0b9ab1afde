"""
Exceptions of the XIRR core.

Неконвергенция метода Ньютона исключением НЕ является: solver возвращает
nan (семантика табличных процессоров). Исключения ниже — только для
нарушения предусловий на входные данные.
"""


class InvalidPaymentsError(ValueError):
    """
    Набор платежей не содержит одновременно положительных и отрицательных сумм.

    Поднимается compute() до начала любых вычислений. Сообщение фиксированное.
    """

    MESSAGE = "negative and positive payments are required"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)
