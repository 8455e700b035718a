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


import pytest

from hdhr_dvr_manager.hdhr import errors
from hdhr_dvr_manager.hdhr.lineup import Channel
from hdhr_dvr_manager.hdhr.recordings import RecordedSeries
from hdhr_dvr_manager.hdhr.recordings import Recording
from hdhr_dvr_manager.hdhr.rules import RecordingRule
from hdhr_dvr_manager.hdhr.status import LogEntry
from hdhr_dvr_manager.hdhr.status import Status
from hdhr_dvr_manager.session import Session
from hdhr_dvr_manager.store import PolicyStore

BASE_URL = 'http://192.168.1.104:80'


def episodes_url(series_id):
    return(f'{BASE_URL}/recorded_files.json?SeriesID={series_id}')


def recording_json(program_id, series_id, title, start_time,
                   episode_title=''):
    return({'ProgramID': program_id,
            'SeriesID': series_id,
            'Title': title,
            'EpisodeTitle': episode_title or f'Episode {program_id}',
            'EpisodeNumber': f'S01E{program_id[-2:]}',
            'StartTime': start_time,
            'RecordStartTime': start_time,
            'RecordEndTime': start_time + 1800,
            'PlayURL': f'{BASE_URL}/recorded/play?id={program_id}',
            'CmdURL': f'{BASE_URL}/recorded/cmd?id={program_id}',
            })


def sample_library():
    """Two series as a device reports them: series JSON and each series'
    recordings, in device order"""

    series = [
      {'SeriesID': 'C184056EN', 'Title': 'Jeopardy!', 'Category': 'series',
       'EpisodesURL': episodes_url('C184056EN'), 'StartTime': 1600000000,
       'UpdateID': 1},
      {'SeriesID': 'C197235EN', 'Title': 'NOVA', 'Category': 'series',
       'EpisodesURL': episodes_url('C197235EN'), 'StartTime': 1600000500,
       'UpdateID': 2},
      ]
    episodes = {
      episodes_url('C184056EN'): [
        recording_json('EP01', 'C184056EN', 'Jeopardy!', 1600400000),
        recording_json('EP02', 'C184056EN', 'Jeopardy!', 1600300000),
        recording_json('EP03', 'C184056EN', 'Jeopardy!', 1600200000),
        recording_json('EP04', 'C184056EN', 'Jeopardy!', 1600100000),
        ],
      episodes_url('C197235EN'): [
        recording_json('EP11', 'C197235EN', 'NOVA', 1600350000),
        recording_json('EP12', 'C197235EN', 'NOVA', 1600050000),
        ],
      }
    return(series, episodes)


class FakeStorageServer:
    """Storage server that keeps its series and recordings in memory and
    counts the calls made to it"""

    friendly_name = 'HDHomeRun SCRIBE QUATRO'
    model_number = 'HDVR-4US-1TB'
    id = '10A0B0C0'
    key = '10A0B0C0'
    storage_id = '10A0B0C0-B4E1-4F5A-A6B2-8C5E4C5F0E8B'
    storage_url = f'{BASE_URL}/recorded_files.json'
    base_url = BASE_URL
    ip_addr = '192.168.1.104'
    discover_url = f'{BASE_URL}/discover.json'
    lineup_url = f'{BASE_URL}/lineup.json'
    firmware_name = 'hdhomerun_dvr_atsc3'
    firmware_version = '20230713'
    device_auth = 'nT3Uv2pVbOO3EY0f2yDCMhOk'
    tuner_count = 4
    total_space = 1000204886016
    free_space = 834232254464
    used_space = total_space - free_space

    def __init__(self, series=None, episodes=None):
        if series is None:
            series, episodes = sample_library()
        self.series = series
        self.episodes = episodes
        self.calls = {}
        self.deleted = []
        self.failing = set()
        self.refused = set()
        self.sizes = {}

    def _called(self, name):
        self.calls[name] = self.calls.get(name, 0) + 1

    def refresh(self):
        self._called('refresh')

    def all_recorded_series(self):
        self._called('all_recorded_series')
        return([RecordedSeries(json) for json in self.series])

    def recorded_episodes(self, url):
        self._called('recorded_episodes')
        return([Recording(json) for json in self.episodes.get(url, [])])

    def delete_recording(self, command_url):
        self._called('delete_recording')
        if command_url in self.failing:
            raise errors.RemoteFailure(command_url, '503 Server Error')
        if command_url in self.refused:
            return(False)
        self.deleted.append(command_url)
        for recordings in self.episodes.values():
            recordings[:] = [json for json in recordings
                             if json['CmdURL'] != command_url
                             ]
        return(True)

    def probe_file_size(self, play_url):
        self._called('probe_file_size')
        if play_url not in self.sizes:
            raise errors.RemoteFailure(play_url, '404 Not Found')
        return(self.sizes[play_url])

    def channels(self):
        self._called('channels')
        return([Channel({'GuideNumber': '2.1', 'GuideName': 'WCBS-HD',
                         'VideoCodec': 'MPEG2', 'AudioCodec': 'AC3',
                         'URL': f'{BASE_URL}:5004/auto/v2.1', 'HD': 1
                         }, 1),
                Channel({'GuideNumber': '13.1', 'GuideName': 'WNET',
                         'URL': f'{BASE_URL}:5004/auto/v13.1'
                         }, 2),
                ])

    def status(self):
        self._called('status')
        return([Status({'Resource': 'tuner0', 'VctNumber': '13.1',
                        'VctName': 'WNET'}),
                Status({'Resource': 'playback', 'Name': 'Living Room'}),
                ])

    def log(self):
        self._called('log')
        return([LogEntry(1600000000, 'Recording started: NOVA'),
                LogEntry(1600000060, 'Tuner 0 lock acquired'),
                ])

    def recording_rules(self):
        self._called('recording_rules')
        return([RecordingRule({'RecordingRuleID': '1', 'SeriesID': 'C184056EN',
                               'Title': 'Jeopardy!', 'Priority': 5}),
                RecordingRule({'RecordingRuleID': '2', 'SeriesID': 'C197235EN',
                               'Title': 'NOVA', 'Priority': 9}),
                ])


@pytest.fixture
def device():
    return(FakeStorageServer())


@pytest.fixture
def store(tmp_path):
    store = PolicyStore(FakeStorageServer.key, str(tmp_path))
    store.load_all()
    return(store)


@pytest.fixture
def session(device, store):
    session = Session(device, store)
    session.initialize()
    return(session)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
