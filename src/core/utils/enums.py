import enum


class PersonKind(str, enum.Enum):
    """Tipo de pessoa. Define qual documento (CPF ou CNPJ) é esperado."""
    FISICA = "FISICA"      # Pessoa física: CPF, 11 dígitos
    JURIDICA = "JURIDICA"  # Pessoa jurídica: CNPJ, 14 dígitos


class Gender(str, enum.Enum):
    MASCULINO = "MASCULINO"
    FEMININO = "FEMININO"
    NAO_INFORMAR = "NAO_INFORMAR"


class EntityType(str, enum.Enum):
    """
    Cadastros do back office.
    IMPORTANTE: os valores aparecem nas URLs da API (/forms/{entity_type}/validate).
    """
    CUSTOMER = "customer"
    SUPPLIER = "supplier"
    EMPLOYEE = "employee"
    PRODUCT = "product"


class RecordStatus(str, enum.Enum):
    ATIVO = "ATIVO"
    INATIVO = "INATIVO"
