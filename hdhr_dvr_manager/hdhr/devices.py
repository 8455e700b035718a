#!/usr/bin/env python

# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
# Copyright (c) 2015-2019 Silicondust, Inc.
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

import logging
import socket
from urllib.parse import urlparse

import requests

from hdhr_dvr_manager.const import CLOUD_DISCOVER_URL
from hdhr_dvr_manager.const import DEFAULT_TIMEOUT
from hdhr_dvr_manager.const import DISCOVER_DEVICE_ID
from hdhr_dvr_manager.const import RECORDING_RULES_URL
from hdhr_dvr_manager.hdhr import errors
from hdhr_dvr_manager.hdhr.lineup import Channel
from hdhr_dvr_manager.hdhr.recordings import RecordedSeries
from hdhr_dvr_manager.hdhr.recordings import Recording
from hdhr_dvr_manager.hdhr.rules import RecordingRule
from hdhr_dvr_manager.hdhr.status import Status
from hdhr_dvr_manager.hdhr.status import parse_log

logger = logging.getLogger(__name__)


def _request(method, url, timeout, **kwargs):
    """Issues an HTTP request, raising RemoteFailure for any failure"""
    try:
        response = requests.request(method, url, timeout=timeout, **kwargs)
        response.raise_for_status()
    except requests.RequestException as e:
        raise errors.RemoteFailure(url, e) from e
    return(response)


def _get_json(url, timeout):
    response = _request('GET', url, timeout)
    try:
        return(response.json())
    except ValueError as e:
        raise errors.RemoteFailure(url, f'invalid JSON: {e}') from e


class Devices():

    def __init__(self, timeout=DEFAULT_TIMEOUT):
        self._timeout = timeout
        self.rediscover()

    def rediscover(self):
        """Forgets all devices and runs discovery again"""
        self._storage_servers = []
        self._tuner_devices = []
        self.discover()

    def discover(self):
        """Discovers devices and adds them to the list if they are new"""
        try:
            entries = _get_json(CLOUD_DISCOVER_URL, self._timeout)
        except errors.RemoteFailure as e:
            logger.warning(f'Device discovery failed: {e}')
            return()

        for entry in entries:
            try:
                self._add(self._create_device(entry))
            except errors.RemoteFailure as e:
                logger.warning('Discovered device is not responding: '
                               f'{e}'
                               )

    def _add(self, device):
        if device in self:
            return(False)

        if isinstance(device, StorageServer):
            self._storage_servers.append(device)
        else:
            self._tuner_devices.append(device)

        return(True)

    def _create_device(self, json):
        discover_url = json.get('DiscoverURL')
        if not discover_url:
            discover_url = json.get('BaseURL', '') + '/' + \
                Device._discover_uri
        discover_json = dict(json)
        discover_json.update(_get_json(discover_url, self._timeout))
        discover_json['DiscoverURL'] = discover_url

        if 'StorageURL' in discover_json:
            return(StorageServer(discover_json, self._timeout))
        return(Device(discover_json, self._timeout))

    def probe_host(self, host):
        """Reads discover.json directly from a host that discovery missed"""
        device = self._create_device({'BaseURL': f'http://{host}'})
        self._add(device)
        return(device)

    def __contains__(self, device):
        for d in self.all_devices:
            if d == device:
                return(True)
        return(False)

    @property
    def storage_servers(self):
        """Returns a list of all storage servers"""
        return(self._storage_servers)

    @property
    def tuner_devices(self):
        """Returns a list of all tuner-only devices"""
        return(self._tuner_devices)

    @property
    def all_devices(self):
        """Returns a list of all devices"""
        return(list(self._tuner_devices) + self._storage_servers)

    def get_storage_by_id(self, id):
        """Returns the storage server with the given device or storage ID"""
        for d in self._storage_servers:
            if id.upper() in (d.id.upper(), d.storage_id.upper()):
                return(d)
        return(None)

    def get_storage_by_ip(self, ip_addr):
        """Returns the storage server with the given IP address"""
        for d in self._storage_servers:
            if d.ip_addr == ip_addr:
                return(d)
        return(None)

    def find(self, device_key):
        """Resolves "discover", an ID, an IP address, or a hostname to a
        storage server. Raises DeviceNotFoundError if there is none."""

        if device_key.upper() == DISCOVER_DEVICE_ID.upper():
            if self._storage_servers:
                return(self._storage_servers[0])
            raise errors.DeviceNotFoundError(device_key)

        device = self.get_storage_by_id(device_key)
        if device is not None:
            return(device)

        try:
            ip_addr = socket.gethostbyname(device_key)
        except socket.gaierror:
            raise errors.DeviceNotFoundError(device_key)

        device = self.get_storage_by_ip(ip_addr)
        if device is not None:
            return(device)

        try:
            device = self.probe_host(ip_addr)
        except errors.RemoteFailure as e:
            logger.debug(f'Probe of {device_key} failed: {e}')
            raise errors.DeviceNotFoundError(device_key)
        if not isinstance(device, StorageServer):
            raise errors.DeviceNotFoundError(device_key)
        return(device)


class Device():
    _type_name = 'Device'
    _discover_uri = 'discover.json'
    _status_uri = 'status.json'
    _log_uri = 'log.html'

    _json_attr_str_map = {'FriendlyName': '_friendly_name',
                          'ModelNumber': '_model_number',
                          'FirmwareName': '_firmware_name',
                          'FirmwareVersion': '_firmware_version',
                          'DeviceID': '_id',
                          'DeviceAuth': '_device_auth',
                          'BaseURL': '_base_url',
                          'LocalIP': '_local_ip',
                          'DiscoverURL': '_discover_url',
                          'LineupURL': '_lineup_url',
                          'StorageID': '_storage_id',
                          'StorageURL': '_storage_url',
                          'Version': '_version',
                          }
    _json_attr_int_map = {'TunerCount': '_tuner_count',
                          'TotalSpace': '_total_space',
                          'FreeSpace': '_free_space',
                          }

    # FriendlyName	"HDHomeRun SCRIBE QUATRO"
    # ModelNumber	"HDVR-4US-1TB"
    # FirmwareName	"hdhomerun_dvr_atsc"
    # FirmwareVersion	"20220822"
    # DeviceID	"10A0B0C0"
    # DeviceAuth	"nT3Uv2pVbOO3EY0f2yDCMhOk"
    # BaseURL	"http://192.168.1.104:80"
    # LineupURL	"http://192.168.1.104:80/lineup.json"
    # TunerCount	4
    # StorageID	"10A0B0C0-B4E1-4F5A-A6B2-8C5E4C5F0E8B"
    # StorageURL	"http://192.168.1.104:80/recorded_files.json"
    # TotalSpace	1000204886016
    # FreeSpace	834232254464

    def __init__(self, json, timeout=DEFAULT_TIMEOUT):
        self._timeout = timeout
        self._update(json)

    def _update(self, json):
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, str(json[key]))
        for key, attr in self._json_attr_int_map.items():
            if key in json:
                setattr(self, attr, int(json[key]))

    def __eq__(self, other):
        if not isinstance(other, Device):
            return(False)
        return(self.base_url == other.base_url)

    def __ne__(self, other):
        return(not self.__eq__(other))

    def __str__(self):
        return(self.__repr__())

    def __repr__(self):
        return(f"<{self._type_name} id={self.id or '?'}"
               f":url={self.base_url or '?'}>"
               )

    @property
    def id(self):
        """Device ID"""
        return(getattr(self, '_id', ''))

    @property
    def base_url(self):
        """HTTP URL of the device (e.g., http://192.168.1.104:80)"""
        return(getattr(self, '_base_url', ''))

    @property
    def ip_addr(self):
        """Device IP address"""
        local_ip = getattr(self, '_local_ip', '')
        if local_ip:
            return(local_ip)
        return(urlparse(self.base_url).hostname or '')

    @property
    def discover_url(self):
        """HTTP URL to get json-formatted data about the device"""
        return(getattr(self, '_discover_url',
                       self.base_url + '/' + self._discover_uri
                       ))

    @property
    def lineup_url(self):
        """HTTP URL to get the json-formatted channel lineup"""
        return(getattr(self, '_lineup_url', ''))

    @property
    def friendly_name(self):
        """Friendly name (e.g., HDHomeRun SCRIBE QUATRO)"""
        return(getattr(self, '_friendly_name', ''))

    @property
    def model_number(self):
        """Model number (e.g., HDVR-4US-1TB)"""
        return(getattr(self, '_model_number', ''))

    @property
    def firmware_name(self):
        """Firmware name (e.g., hdhomerun_atsc)"""
        return(getattr(self, '_firmware_name', ''))

    @property
    def firmware_version(self):
        """Firmware version (e.g., 20200521)"""
        return(getattr(self, '_firmware_version', ''))

    @property
    def device_auth(self):
        """API auth string for this device"""
        return(getattr(self, '_device_auth', None))

    @property
    def tuner_count(self):
        """Number of tuners on this device"""
        return(getattr(self, '_tuner_count', 0))

    def refresh(self):
        """Refresh device data that can get stale (e.g., free space)"""
        self._update(_get_json(self.discover_url, self._timeout))

    def channels(self):
        """Returns the channel lineup as a list of Channel objects"""
        if not self.lineup_url:
            raise errors.HDHomeRunException(f'{self} has no channel lineup')
        return([Channel(channel_json, seq) for seq, channel_json
                in enumerate(_get_json(self.lineup_url, self._timeout),
                             start=1
                             )])

    def status(self):
        """Returns a list of Status objects, one per resource in use"""
        url = self.base_url + '/' + self._status_uri
        return([Status(status_json) for status_json
                in _get_json(url, self._timeout)
                ])

    def log(self):
        """Returns the device log as a list of LogEntry objects"""
        url = self.base_url + '/' + self._log_uri
        return(parse_log(_request('GET', url, self._timeout).text))


class StorageServer(Device):
    _type_name = 'StorageServer'

    def __eq__(self, other):
        if not isinstance(other, StorageServer):
            return(False)
        return(self.base_url == other.base_url)

    @property
    def storage_id(self):
        """Device's unique storage ID"""
        return(getattr(self, '_storage_id', ''))

    @property
    def storage_url(self):
        """HTTP URL to get the json-formatted list of recorded series"""
        return(getattr(self, '_storage_url', ''))

    @property
    def key(self):
        """Identifier that stays the same across reboots and IP changes"""
        return(self.id or self.storage_id)

    @property
    def total_space(self):
        """Total size of storage in bytes"""
        return(getattr(self, '_total_space', None))

    @property
    def free_space(self):
        """Amount of free space in bytes"""
        return(getattr(self, '_free_space', None))

    @property
    def used_space(self):
        """Amount of used space in bytes"""
        if self.total_space is None or self.free_space is None:
            return(None)
        return(self.total_space - self.free_space)

    @property
    def version(self):
        """Version of software. Only applicable to RECORD software."""
        return(getattr(self, '_version', ''))

    def all_recorded_series(self):
        """Returns a list of RecordedSeries objects"""
        all_series = []
        for series_json in _get_json(self.storage_url, self._timeout):
            if series_json.get('SeriesID') not in (s.series_id for s
                                                   in all_series
                                                   ):
                all_series.append(RecordedSeries(series_json))
        return(all_series)

    def recorded_episodes(self, episodes_url):
        """Returns the Recording objects at a series' EpisodesURL"""
        return([Recording(recording_json) for recording_json
                in _get_json(episodes_url, self._timeout)
                ])

    def delete_recording(self, command_url):
        """Deletes a recording. Returns True if the device reports OK."""
        url = f'{command_url}&cmd=delete'
        response = _request('POST', url, self._timeout)
        return(response.status_code == requests.codes.ok)

    def probe_file_size(self, play_url):
        """Size of a recording in bytes, read with a HEAD request"""
        response = _request('HEAD', play_url, self._timeout)
        length = response.headers.get('Content-Length')
        if length is None:
            raise errors.RemoteFailure(play_url, 'no Content-Length')
        try:
            return(int(length))
        except ValueError as e:
            raise errors.RemoteFailure(play_url,
                                       f'invalid Content-Length: {length}'
                                       ) from e

    def recording_rules(self):
        """Returns the recording rules for this device from the HDHomeRun
        API"""
        if not self.device_auth:
            raise errors.NoDeviceAuthException()
        url = f'{RECORDING_RULES_URL}?DeviceAuth={self.device_auth}'
        return([RecordingRule(rule_json) for rule_json
                in _get_json(url, self._timeout) or []
                ])

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
