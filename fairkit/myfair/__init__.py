"""Neutral core metadata record and its vocabularies."""