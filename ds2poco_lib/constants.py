"""
Constants used throughout the DS2POCO library.
"""

# OData primitive type mappings to C# types
EDM_PRIMITIVE_TYPES = {
    "Edm.Guid": "Guid",
    "Edm.DateTime": "DateTime",
    "Edm.String": "string",
    "Edm.Int32": "int",
    "Edm.Boolean": "bool",
}

# Namespaces for locating the envelope and the metadata-specific elements
NAMESPACES = {
    'edmx': 'http://schemas.microsoft.com/ado/2007/06/edmx',
    'm': 'http://schemas.microsoft.com/ado/2007/08/dataservices/metadata',
}

DATA_SERVICES_XPATH = '/edmx:Edmx/edmx:DataServices'

# Element names walked below DataServices (compared case-insensitively)
ENTITY_TYPE_TAG = 'EntityType'
PROPERTY_TAG = 'Property'

DEFAULT_NAMESPACE = 'Proxy'
SYSTEM_NAMESPACE = 'System'
SOURCE_FILE_EXTENSION = '.cs'

INDENT = '    '
DEFAULT_LINE_ENDING = '\r\n'

# UTC timestamp prefix of every feedback message: yyyy.MM.dd HH:mm:ss.fff
FEEDBACK_TIMESTAMP_FORMAT = '%Y.%m.%d %H:%M:%S'

USER_AGENT = 'DS2POCO/1.0'

# C# reserved keywords; identifiers colliding with these get an '@' prefix
CSHARP_KEYWORDS = {
    'abstract', 'as', 'base', 'bool', 'break', 'byte', 'case', 'catch',
    'char', 'checked', 'class', 'const', 'continue', 'decimal', 'default',
    'delegate', 'do', 'double', 'else', 'enum', 'event', 'explicit',
    'extern', 'false', 'finally', 'fixed', 'float', 'for', 'foreach', 'goto',
    'if', 'implicit', 'in', 'int', 'interface', 'internal', 'is', 'lock',
    'long', 'namespace', 'new', 'null', 'object', 'operator', 'out',
    'override', 'params', 'private', 'protected', 'public', 'readonly',
    'ref', 'return', 'sbyte', 'sealed', 'short', 'sizeof', 'stackalloc',
    'static', 'string', 'struct', 'switch', 'this', 'throw', 'true', 'try',
    'typeof', 'uint', 'ulong', 'unchecked', 'unsafe', 'ushort', 'using',
    'virtual', 'void', 'volatile', 'while',
}

# Names accepted for generated classes and properties (before '@' escaping)
IDENTIFIER_PATTERN = r'^[A-Za-z_][A-Za-z0-9_]*$'
