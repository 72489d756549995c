"""Handle System protocol fields, envelope and credential codecs."""