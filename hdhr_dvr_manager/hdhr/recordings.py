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

# When a recording has been watched all the way to the end, the Resume
# value is set to this constant.
MAX_RESUME_OFFSET = 0xFFFFFFFF


class RecordedSeries:
    _type_name = 'RecordedSeries'
    _json_attr_str_map = {'SeriesID': '_series_id',
                          'Title': '_title',
                          'Category': '_category',
                          'ImageURL': '_image_url',
                          'EpisodesURL': '_episodes_url',
                          }
    _json_attr_int_map = {'StartTime': '_start_time',
                          'UpdateID': '_update_id',
                          }

    # SeriesID	"C184249ENDJE6"
    # Title	"America's Funniest Home Videos"
    # Category	"series"
    # ImageURL	"http://img.hdhomerun.com/titles/C184249ENDJE6.jpg"
    # StartTime	1591570800
    # EpisodesURL       "http://192.168.1.104:80/recorded_files.json?SeriesI...
    # UpdateID	3033907720

    def __init__(self, json, seq=0):
        self.seq = seq
        self.keep_count = None
        self.recordings = []
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, json[key])
        for key, attr in self._json_attr_int_map.items():
            if key in json:
                setattr(self, attr, int(json[key]))

    def __repr__(self):
        return(f"<{self._type_name} seq={self.seq}"
               f":id={getattr(self, '_series_id', '?')}"
               f":title={getattr(self, '_title', '?')}>"
               )

    @property
    def series_id(self):
        """Unique series ID"""
        return(getattr(self, '_series_id', ''))

    @property
    def title(self):
        """Series title"""
        return(getattr(self, '_title', ''))

    @property
    def category(self):
        """Series category"""
        return(getattr(self, '_category', ''))

    @property
    def image_url(self):
        """HTTP URL for the series image"""
        return(getattr(self, '_image_url', ''))

    @property
    def episodes_url(self):
        """HTTP URL for the list of recorded episodes"""
        return(getattr(self, '_episodes_url', ''))

    @property
    def start_time(self):
        """Start time of the most recent recording"""
        return(getattr(self, '_start_time', None))

    @property
    def update_id(self):
        """Changes whenever the series' recordings change"""
        return(getattr(self, '_update_id', None))

    @property
    def keeps_all(self):
        """True if every recording of the series is kept"""
        return(self.keep_count is None)

    @property
    def protected_count(self):
        """Number of protected recordings"""
        return(sum(1 for r in self.recordings if r.protected))


class Recording:
    _type_name = 'Recording'
    _json_attr_str_map = {'Category': '_category',
                          'ImageURL': '_image_url',
                          'ProgramID': '_program_id',
                          'SeriesID': '_series_id',
                          'Synopsis': '_synopsis',
                          'Title': '_series_title',
                          'Filename': '_filename',
                          'PlayURL': '_play_url',
                          'CmdURL': '_command_url',
                          'EpisodeTitle': '_episode_title',
                          'EpisodeNumber': '_episode_number'
                          }
    _json_attr_int_map = {'OriginalAirdate': '_original_airdate',
                          'RecordEndTime': '_record_end_time',
                          'RecordStartTime': '_record_start_time',
                          'Resume': '_resume_offset',
                          'StartTime': '_start_time',
                          'EndTime': '_end_time',
                          }

    # Category	"series"
    # EndTime	1591574400
    # EpisodeNumber	"S30E21"
    # EpisodeTitle	"Nine Finalists"
    # OriginalAirdate	1591488000
    # ProgramID	"EP000168930995"
    # RecordEndTime	1591574430
    # RecordStartTime	1591570772
    # Resume	1610
    # SeriesID	"C184249ENDJE6"
    # StartTime	1591570800
    # Synopsis	"Nine finalists compete for the $100,000 prize; basketball b...
    # Title	"America's Funniest Home Videos"
    # Filename	"America's Funniest Home Videos S30E21 20200607 [20200607-23...
    # PlayURL	"http://192.168.1.104:80/recorded/play?id=a156f919"
    # CmdURL	"http://192.168.1.104:80/recorded/cmd?id=a156f919"

    def __init__(self, json, seq=0):
        self.seq = seq
        self.protected = False
        self.deleted = False
        self.file_size = None
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, json[key])
        for key, attr in self._json_attr_int_map.items():
            if key in json:
                setattr(self, attr, int(json[key]))

    def __repr__(self):
        return(f"<{self._type_name} seq={self.seq}"
               f":program_id={getattr(self, '_program_id', '?')}>"
               )

    @property
    def category(self):
        """Category of the recording"""
        return(getattr(self, '_category', ''))

    @property
    def end_time(self):
        """Scheduled end time of the program"""
        return(getattr(self, '_end_time', None))

    @property
    def episode_number(self):
        """Episode number (e.g., S30E21)"""
        return(getattr(self, '_episode_number', ''))

    @property
    def episode_title(self):
        """Episode title"""
        return(getattr(self, '_episode_title', ''))

    @property
    def image_url(self):
        """HTTP URL for the recording image"""
        return(getattr(self, '_image_url', ''))

    @property
    def original_airdate(self):
        """Original airdate of this episode"""
        return(getattr(self, '_original_airdate', None))

    @property
    def program_id(self):
        """Unique ID for this episode"""
        return(getattr(self, '_program_id', ''))

    @property
    def record_end_time(self):
        """End time of the recording"""
        return(getattr(self, '_record_end_time', None))

    @property
    def record_start_time(self):
        """Start time of the recording"""
        return(getattr(self, '_record_start_time', None))

    @property
    def resume_offset(self):
        """Number of seconds from the beginning to resume playing"""
        return(getattr(self, '_resume_offset', 0))

    @property
    def is_watched(self):
        """True once playback has reached the end of the recording"""
        return(self.resume_offset == MAX_RESUME_OFFSET)

    @property
    def series_id(self):
        """Unique series ID"""
        return(getattr(self, '_series_id', ''))

    @property
    def start_time(self):
        """Scheduled start time of the program"""
        return(getattr(self, '_start_time', None))

    @property
    def recorded_seconds(self):
        """Length of the recording in seconds, or None if unknown"""
        if self.record_start_time is None or self.record_end_time is None:
            return(None)
        return(max(self.record_end_time - self.record_start_time, 0))

    @property
    def synopsis(self):
        """Synopsis of the episode"""
        return(getattr(self, '_synopsis', ''))

    @property
    def series_title(self):
        """Series title"""
        return(getattr(self, '_series_title', ''))

    @property
    def filename(self):
        """File name of the recording"""
        return(getattr(self, '_filename', ''))

    @property
    def play_url(self):
        """HTTP URL to initiate playback"""
        return(getattr(self, '_play_url', ''))

    @property
    def command_url(self):
        """HTTP URL for commands such as delete"""
        return(getattr(self, '_command_url', ''))

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
