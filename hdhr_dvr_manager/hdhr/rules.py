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


class RecordingRule:
    _type_name = 'RecordingRule'
    _json_attr_str_map = {'RecordingRuleID': '_rule_id',
                          'SeriesID': '_series_id',
                          'Title': '_title',
                          'Category': '_category',
                          'ChannelOnly': '_channel_only',
                          'Synopsis': '_synopsis',
                          }
    _json_attr_int_map = {'Priority': '_priority',
                          'StartPadding': '_start_padding',
                          'EndPadding': '_end_padding',
                          'DateTimeOnly': '_date_time_only',
                          }
    _json_attr_bool_map = {'RecentOnly': '_recent_only',
                           }

    # RecordingRuleID	"7214425"
    # SeriesID	"C184249ENDJE6"
    # Title	"America's Funniest Home Videos"
    # Category	"series"
    # ChannelOnly	"8.1"
    # RecentOnly	1
    # Priority	12
    # StartPadding	30
    # EndPadding	180

    def __init__(self, json):
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, str(json[key]))
        for key, attr in self._json_attr_int_map.items():
            if key in json:
                setattr(self, attr, int(json[key]))
        for key, attr in self._json_attr_bool_map.items():
            setattr(self, attr, bool(int(json.get(key, 0))))

    def __repr__(self):
        return(f"<{self._type_name} id={getattr(self, '_rule_id', '?')}"
               f":title={getattr(self, '_title', '?')}>"
               )

    @property
    def rule_id(self):
        return(getattr(self, '_rule_id', ''))

    @property
    def series_id(self):
        return(getattr(self, '_series_id', ''))

    @property
    def title(self):
        return(getattr(self, '_title', ''))

    @property
    def category(self):
        return(getattr(self, '_category', ''))

    @property
    def channel_only(self):
        """Channel the rule is restricted to, or '' for any channel"""
        return(getattr(self, '_channel_only', ''))

    @property
    def priority(self):
        return(getattr(self, '_priority', 0))

    @property
    def start_padding(self):
        """Seconds recorded before the scheduled start"""
        return(getattr(self, '_start_padding', 0))

    @property
    def end_padding(self):
        """Seconds recorded after the scheduled end"""
        return(getattr(self, '_end_padding', 0))

    @property
    def recent_only(self):
        """True if only new episodes are recorded"""
        return(self._recent_only)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
