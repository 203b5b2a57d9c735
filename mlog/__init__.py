"""mlog — narzędzie CLI i pętla sesji minilog."""
