# Part of Nodeproxy, see License file for full copyright and licensing details.

import optparse
import warnings

import nodeproxy

from .. import release


class MyOption(optparse.Option, object):
    """ optparse Option with two additional attributes.

    The list of command line options (getopt.Option) is used to create the
    list of the configuration options. When parsing the command line
    arguments, we don't want optparse defaults to override values set from
    code. But if we provide default values to optparse, optparse will return
    them and we can't know if they were really provided by the user or not. A
    solution is to not use optparse's default attribute, but use a custom one
    (that will be copied to create the default values of the configuration).

    """
    def __init__(self, *opt, **attrs):
        self.my_default = attrs.pop('my_default', None)
        super(MyOption, self).__init__(*opt, **attrs)


class configmanager(object):
    def __init__(self):
        self.options = {}

        # dictionary mapping option destination (keys in self.options) to MyOptions.
        self.casts = {}

        version = "%s %s" % (release.description, release.version)
        self.parser = parser = optparse.OptionParser(version=version, option_class=MyOption)

        group = optparse.OptionGroup(parser, "Read-only views")
        group.add_option("--proxy-suffix", dest="proxy_suffix", my_default="_ReadOnly",
                         help="suffix appended to the name of synthesized read-only classes")
        parser.add_option_group(group)

        group = optparse.OptionGroup(parser, "Logging Configuration")
        group.add_option("--logfile", dest="logfile", my_default=None,
                         help="file where the log output will be written")
        group.add_option('--log-handler', action="append", dest="log_handler", my_default=[], metavar="PREFIX:LEVEL",
                         help='setup a handler at LEVEL for a given PREFIX. An empty PREFIX indicates the root logger. This option can be repeated. Example: "nodeproxy.registry:DEBUG" (default: ":INFO")')
        levels = ['info', 'debug', 'warn', 'error', 'critical']
        group.add_option('--log-level', dest='log_level', type='choice', choices=levels, my_default='info',
                         help='specify the level of the logging. Accepted values: %s.' % (levels,))
        parser.add_option_group(group)

        for group in parser.option_groups:
            for option in group.option_list:
                if option.dest not in self.options:
                    self.options[option.dest] = option.my_default
                    self.casts[option.dest] = option

        self._parse_config()

    def parse_config(self, args: list[str] | None = None, *, setup_logging: bool | None = None) -> None:
        """ Parse the cli arguments.

        This function inits nodeproxy.tools.config.

        Typical usage of this function:

            nodeproxy.tools.config.parse_config(sys.argv[1:], setup_logging=True)
        """
        opt = self._parse_config(args)
        if setup_logging is not False:
            nodeproxy.netsvc.init_logger()
            if setup_logging is None:
                warnings.warn(
                    "It's recommended to specify wheter"
                    " you want Nodeproxy to setup its own logging"
                    " (or want to handle it yourself)",
                    category=PendingDeprecationWarning,
                    stacklevel=2,
                )
        return opt

    def _parse_config(self, args=None):
        if args is None:
            args = []
        opt, args = self.parser.parse_args(args)

        for arg in self.options:
            value = getattr(opt, arg, None)
            if value is not None:
                self.options[arg] = value

        suffix = self.options['proxy_suffix']
        if not suffix or not ('X' + suffix).isidentifier():
            self.parser.error("the read-only suffix %r is not a valid identifier part" % suffix)
        return opt

    def get(self, key, default=None):
        return self.options.get(key, default)

    def pop(self, key, default=None):
        return self.options.pop(key, default)

    def __setitem__(self, key, value):
        self.options[key] = value

    def __getitem__(self, key):
        return self.options[key]

config = configmanager()
