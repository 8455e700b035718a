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

import calendar
import html
import re
import time

# Device log lines look like "20221012-13:45:22 Recording: ...". The
# timestamp is UTC.
LOG_LINE_PATTERN = re.compile(r'^(?P<timestamp>\d{8}-\d{2}:\d{2}:\d{2}) '
                              r'(?P<message>.*)$'
                              )
LOG_TIMESTAMP_FORMAT = '%Y%m%d-%H:%M:%S'
HTML_TAG_PATTERN = re.compile(r'<[^>]+>')


class Status:
    _type_name = 'Status'
    _json_attr_str_map = {'Resource': '_resource',
                          'Name': '_name',
                          'VctNumber': '_vct_number',
                          'VctName': '_vct_name',
                          'TargetIP': '_target_ip',
                          }
    _json_attr_int_map = {'Frequency': '_frequency',
                          'BitsPerSecond': '_bits_per_second',
                          }

    # Resource	"tuner0"
    # VctNumber	"8.1"
    # VctName	"WFAADT"
    # Frequency	183000000
    # TargetIP	"192.168.1.104"
    #
    # Resource	"playback"
    # Name	"America's Funniest Home Videos S30E21 20200607 [20200607-23...
    # BitsPerSecond	8400000

    def __init__(self, json):
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, str(json[key]))
        for key, attr in self._json_attr_int_map.items():
            if key in json:
                setattr(self, attr, int(json[key]))

    def __repr__(self):
        return(f"<{self._type_name} resource={self.resource}>")

    @property
    def resource(self):
        """Resource in use (e.g., tuner0, record, playback)"""
        return(getattr(self, '_resource', ''))

    @property
    def is_tuner(self):
        return(self.resource.startswith('tuner'))

    @property
    def name(self):
        return(getattr(self, '_name', ''))

    @property
    def vct_number(self):
        return(getattr(self, '_vct_number', ''))

    @property
    def vct_name(self):
        return(getattr(self, '_vct_name', ''))

    @property
    def target_ip(self):
        return(getattr(self, '_target_ip', ''))

    @property
    def frequency(self):
        return(getattr(self, '_frequency', None))

    @property
    def description(self):
        """Channel for a tuner, program name for anything else"""
        if self.is_tuner:
            return(self.vct_number)
        return(self.name)


class LogEntry:

    def __init__(self, timestamp, message):
        self.timestamp = timestamp
        self.message = message

    def __repr__(self):
        return(f'<LogEntry timestamp={self.timestamp}:message={self.message}>')

    def __str__(self):
        return(time.strftime(LOG_TIMESTAMP_FORMAT, time.gmtime(self.timestamp))
               + ' ' + self.message
               )

    def matches(self, text):
        """Case-insensitive search of the message"""
        return(text.lower() in self.message.lower())


def parse_log(text):
    """Returns LogEntry objects for the lines in a device log page"""

    entries = []
    text = html.unescape(HTML_TAG_PATTERN.sub('\n', text))
    for line in text.splitlines():
        m = LOG_LINE_PATTERN.match(line.strip())
        if not m:
            continue
        timestamp = calendar.timegm(time.strptime(m.group('timestamp'),
                                                  LOG_TIMESTAMP_FORMAT
                                                  ))
        entries.append(LogEntry(timestamp, m.group('message')))
    return(entries)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
