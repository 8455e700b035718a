#!/usr/bin/env python

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


import os

import pytest

from hdhr_dvr_manager.core import parse_args
from hdhr_dvr_manager.settings import Settings
from hdhr_dvr_manager.settings import validate_store_dir
from hdhr_dvr_manager.settings import validate_timeout


def write_conf(tmp_path, text):
    conf_file = tmp_path / 'hdhr_dvr_manager.conf'
    conf_file.write_text(text)
    return(str(conf_file))


class TestValidators:

    def test_validate_timeout(self):

        assert validate_timeout('5') == 5
        assert validate_timeout('2.5') == 2.5
        with pytest.raises(ValueError, match="invalid timeout value: '0'"):
            validate_timeout('0')
        with pytest.raises(ValueError, match='invalid timeout value'):
            validate_timeout('soon')

    def test_validate_store_dir(self, tmp_path):

        assert validate_store_dir(str(tmp_path)) == str(tmp_path)
        assert validate_store_dir('~/dvr') == os.path.expanduser('~/dvr')
        with pytest.raises(ValueError, match='invalid store_dir value'):
            validate_store_dir('')
        not_a_dir = tmp_path / 'file'
        not_a_dir.write_text('')
        with pytest.raises(ValueError, match='invalid store_dir value'):
            validate_store_dir(str(not_a_dir))


class TestSettings:

    def test_defaults(self):

        settings = Settings(parse_args([]))
        assert settings['global'] == {'device_id': 'discover',
                                      'timeout': 10,
                                      'verbose': False}
        assert settings['device:10A0B0C0'] == {
            'store_dir': os.path.expanduser('~/.hdhr_dvr_manager'),
            'simulate': False}

    def test_conf_file(self, tmp_path):

        conf_file_path = write_conf(tmp_path, '\n'.join([
            '[DEFAULT]',
            'device_id = 10A0B0C0',
            'timeout = 30',
            f'store_dir = {tmp_path}',
            '',
            '[Device:10A0B0C0]',
            'simulate = yes',
            ]))
        settings = Settings(parse_args([]), conf_file_path)
        assert settings['global']['device_id'] == '10A0B0C0'
        assert settings['global']['timeout'] == 30
        assert settings['device:10A0B0C0'] == {'store_dir': str(tmp_path),
                                               'simulate': True}
        assert settings['device:FFFF0000']['simulate'] is False
        assert settings['device:FFFF0000']['store_dir'] == str(tmp_path)

    def test_args_override_conf_file(self, tmp_path):

        conf_file_path = write_conf(tmp_path, '\n'.join([
            '[DEFAULT]',
            'timeout = 30',
            'store_dir = /var/lib/dvr',
            ]))
        args = parse_args(['-t', '3', '-s', str(tmp_path), '-n', '-v'])
        settings = Settings(args, conf_file_path)
        assert settings['global']['timeout'] == 3
        assert settings['global']['verbose'] is True
        assert settings['device:10A0B0C0']['store_dir'] == str(tmp_path)
        assert settings['device:10A0B0C0']['simulate'] is True

    def test_bad_conf_value(self, tmp_path):

        conf_file_path = write_conf(tmp_path, '\n'.join([
            '[device:10A0B0C0]',
            'timeout = never',
            ]))
        with pytest.raises(ValueError, match='(?i)device:10A0B0C0'):
            Settings(parse_args([]), conf_file_path)

    def test_bad_conf_boolean(self, tmp_path):

        conf_file_path = write_conf(tmp_path, '\n'.join([
            '[DEFAULT]',
            'simulate = perhaps',
            ]))
        with pytest.raises(ValueError):
            Settings(parse_args([]), conf_file_path)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
