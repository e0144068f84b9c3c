# -*- coding: utf-8 -*-
# Part of Nodeproxy, see License file for full copyright and licensing details.


class proxy_counter(object):
    """ Statistic counters for a read-only class cache. """
    __slots__ = ['hit', 'miss', 'err', 'gen_time', 'cache_name']

    def __init__(self):
        self.hit = 0
        self.miss = 0
        self.err = 0
        self.gen_time = 0
        self.cache_name = None

    @property
    def ratio(self):
        return 100.0 * self.hit / (self.hit + self.miss or 1)

    def __repr__(self):
        return "<proxy_counter %s: hit=%d miss=%d err=%d gen_time=%.6fs>" % (
            self.cache_name, self.hit, self.miss, self.err, self.gen_time,
        )

