# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor,
# Boston, MA  02110-1301, USA.
# -----------------------------------------------------------------------------


import collections.abc
import configparser
import os
import re

from hdhr_dvr_manager import const

config_section_name_pattern = re.compile(r'(?P<type>[^:]+)((:(?P<id>.*))|$)')


class CaseInsensitiveDict(collections.abc.MutableMapping):
    """ Ordered case insensitive mutable mapping class. """
    def __init__(self, *args, **kwargs):
        self._d = collections.OrderedDict()
        for k, v in collections.OrderedDict(*args, **kwargs).items():
            self[k] = v

    def __len__(self):
        return len(self._d)

    def __iter__(self):
        return iter(self._d)

    def __setitem__(self, k, v):
        self._d[k.lower()] = v

    def __getitem__(self, k):
        return self._d[k.lower()]

    def __delitem__(self, k):
        del self._d[k.lower()]

    def copy(self):
        return self._d.copy()

# End CaseInsensitiveDict


def timeout(string):
    try:
        value = float(string)
    except Exception:
        raise ValueError()
    if (value <= 0):
        raise ValueError()
    return(value)


def validate_timeout(string):
    try:
        value = timeout(string)
        return(value)
    except Exception:
        raise ValueError(f'invalid timeout value: {string!r}')


def store_dir(string):
    if string is None or string.strip() == '':
        raise ValueError()
    path = os.path.expanduser(string)
    if os.path.exists(path) and not os.path.isdir(path):
        raise ValueError()
    return(path)


def validate_store_dir(string):
    try:
        value = store_dir(string)
        return(value)
    except Exception:
        raise ValueError(f'invalid store_dir value: {string!r}')

# End validators


class Settings(collections.UserDict):
    """Resolved settings, looked up by section name: 'global' or
    'device:<key>'. Command-line options override the configuration file,
    which overrides the built-in defaults."""

    _config = None

    def __init__(self, args, conf_file_path=None):
        super().__init__()
        self._args = args
        if conf_file_path is not None:
            self._config = configparser.ConfigParser(
                             dict_type=CaseInsensitiveDict
                             )
            section_name = configparser.DEFAULTSECT
            try:
                self._config.read(conf_file_path)
                for section_name, config_section in self._config.items():
                    if 'timeout' in config_section:
                        validate_timeout(self._config.get(section_name,
                                                          'timeout'
                                                          ))
                    if 'verbose' in config_section:
                        self._config.getboolean(section_name, 'verbose')
                    if 'store_dir' in config_section:
                        validate_store_dir(self._config.get(section_name,
                                                            'store_dir'
                                                            ))
                    if 'simulate' in config_section:
                        self._config.getboolean(section_name, 'simulate')
            except (ValueError, configparser.Error) as e:
                raise ValueError('Configuration file section '
                                 f'"{section_name}": {str(e)}'
                                 )

    # End __init__

    def __getitem__(self, key):
        if key not in self.data:
            m = config_section_name_pattern.match(key)
            section_type = m.group('type')
            section_id = m.group('id')
            if section_type == 'global':
                self._resolve_global_settings()
            elif section_type == 'device':
                self._resolve_device_settings(section_id)

        return self.data[key]

    def _parse_global_conf(self, global_settings):

        section = configparser.DEFAULTSECT

        global_settings['device_id'] = self._config.get(
                                  section, 'device_id',
                                  fallback=global_settings['device_id']
                                  )
        global_settings['timeout'] = validate_timeout(
                                self._config.get(
                                  section, 'timeout',
                                  fallback=global_settings['timeout']
                                  ))
        global_settings['verbose'] = self._config.getboolean(
                                  section, 'verbose',
                                  fallback=global_settings['verbose']
                                  )

    # End parse_global_conf

    def _parse_device_conf(self, device_key, device_settings):

        # Parsing through a name section of the config file will take the
        # DEFAULT section into account automatically. If the device section is
        # not in the file, the DEFAULT section has to be parsed explicitly.
        if self._config.has_section(f'device:{device_key}'):
            section = f'device:{device_key}'
        elif self._config.has_section(device_key):
            section = device_key
        else:
            section = configparser.DEFAULTSECT

        device_settings['store_dir'] = validate_store_dir(
                                   self._config.get(
                                     section, 'store_dir',
                                     fallback=device_settings['store_dir']
                                     ))
        device_settings['simulate'] = self._config.getboolean(
                                   section, 'simulate',
                                   fallback=device_settings['simulate']
                                   )

    # End parse_device_conf

    def _resolve_global_settings(self):

        global_settings = const.DEFAULT_GLOBAL_SETTINGS.copy()
        if self._config is not None:
            self._parse_global_conf(global_settings)
        if self._args.device_id is not None:
            global_settings['device_id'] = self._args.device_id
        if self._args.timeout is not None:
            global_settings['timeout'] = self._args.timeout
        if self._args.verbose:
            global_settings['verbose'] = True

        self.data['global'] = global_settings

    # End _resolve_global_settings

    def _resolve_device_settings(self, device_key):

        device_settings = const.DEFAULT_DEVICE_SETTINGS.copy()
        device_settings['store_dir'] = validate_store_dir(
                                         device_settings['store_dir']
                                         )
        if self._config is not None:
            self._parse_device_conf(device_key, device_settings)
        if self._args.store_dir is not None:
            device_settings['store_dir'] = self._args.store_dir
        if self._args.simulate:
            device_settings['simulate'] = True

        self.data[f'device:{device_key}'] = device_settings

    # End _resolve_device_settings

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
