"""Small character, memory, string, list, output and line-reading helpers."""