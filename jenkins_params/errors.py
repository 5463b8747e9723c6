"""Exception classes for jenkins_params errors"""

import inspect


def is_sequence(arg):
    return (not hasattr(arg, "strip") and
            (hasattr(arg, "__getitem__") or
             hasattr(arg, "__iter__")))


class JenkinsParamsException(Exception):
    pass


class ModuleError(JenkinsParamsException):

    def get_module_name(self):
        frame = inspect.currentframe()
        co_name = frame.f_code.co_name
        module_name = '<unresolved>'
        while frame and co_name != 'read':
            # definition read from a config.xml element
            if co_name == '_read_definition':
                element = frame.f_locals['element']
                module_name = element.tag
                break
            # definition rendered by a formatter
            if co_name == 'format_parameter':
                data = frame.f_locals['properties']
                module_name = data.get('name', module_name)
                break
            frame = frame.f_back
            if frame is None:
                break
            co_name = frame.f_code.co_name

        return module_name


class MissingAttributeError(ModuleError):

    def __init__(self, missing_attribute, module_name=None):
        module = module_name or self.get_module_name()
        if is_sequence(missing_attribute):
            message = "One of {0} must be present in '{1}'".format(
                ', '.join("'{0}'".format(value)
                          for value in missing_attribute), module)
        else:
            message = "Missing {0} from an instance of '{1}'".format(
                missing_attribute, module)

        super(MissingAttributeError, self).__init__(message)


class ParameterFormatError(ModuleError):

    def __init__(self, attribute_name, value, module_name=None):
        module = module_name or self.get_module_name()
        message = "'{0}' is not a usable value for {1}.{2}".format(
            value, module, attribute_name)

        super(ParameterFormatError, self).__init__(message)


class JPConfigException(JenkinsParamsException):
    pass
