"""Save file format core: character table, codec, validation, transfer"""
