"""Request builders for the AWS SSM Parameter Store API."""

from ssmrequest.builder import (
    ACTIONS,
    delete_parameter,
    delete_parameters,
    describe_instance_information,
    get_parameter,
    get_parameter_history,
    get_parameters,
    get_parameters_by_path,
    put_parameter,
)
from ssmrequest.models import (
    InstanceInformationFilter,
    InvalidParameterTypeError,
    ParameterFilter,
    ParameterValueType,
    RequestDescriptor,
)

__version__ = "0.1.0"

__all__ = [
    "ACTIONS",
    "InstanceInformationFilter",
    "InvalidParameterTypeError",
    "ParameterFilter",
    "ParameterValueType",
    "RequestDescriptor",
    "delete_parameter",
    "delete_parameters",
    "describe_instance_information",
    "get_parameter",
    "get_parameter_history",
    "get_parameters",
    "get_parameters_by_path",
    "put_parameter",
]
