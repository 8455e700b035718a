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


class HDHomeRunException(Exception):
    pass


class RemoteFailure(HDHomeRunException):
    """A request to a device or the HDHomeRun API did not succeed"""

    def __init__(self, url, reason):
        self.url = url
        self.reason = reason
        super().__init__(f'{url}: {reason}')


class DeviceNotFoundError(HDHomeRunException):

    def __init__(self, device_key):
        self.device_key = device_key
        super().__init__(f'Device not found: {device_key} (non-storage '
                         'devices are ignored)'
                         )


class NoDeviceAuthException(HDHomeRunException):

    def __init__(self):
        super().__init__('Device does not provide a DeviceAuth string')
