"""
Application-wide constants.
Centralizes magic numbers and user-facing texts.
"""

# Postal code (CEP)
POSTAL_CODE_DIGITS = 8
POSTAL_CODE_PREFIX_DIGITS = 5  # Hyphen goes after the 5th digit

# Phone
PHONE_AREA_DIGITS = 2
LANDLINE_PHONE_DIGITS = 10
MOBILE_PHONE_DIGITS = 11

# Professional registration number
REGISTRATION_NUMBER_MIN_LENGTH = 4
REGISTRATION_NUMBER_MAX_LENGTH = 10

# Working hours: on-the-hour slots "00:00".."23:00"
HOURS_IN_DAY = 24
TIME_SLOTS = tuple(f"{hour:02d}:00" for hour in range(HOURS_IN_DAY))

# Notification texts
VALIDATION_ERROR_TITLE = "Erro de validação"
REGISTRATION_NUMBER_ERROR = "Número de registro deve ter entre 4 e 10 dígitos."
SUBMISSION_SUCCESS_TITLE = "Cadastro enviado com sucesso!"
SUBMISSION_SUCCESS_DESCRIPTION = "Os dados foram enviados para processamento."
SUBMISSION_FAILURE_TITLE = "Erro ao enviar dados"
SUBMISSION_FAILURE_DESCRIPTION = "Falha ao enviar os dados. Tente novamente."
