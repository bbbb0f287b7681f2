from .contract_parser import load_contract, parse_contract
from .yaml_parser import YamlParser, yaml_parser
