class DictIO:
    """Case-insensitive access to the keyword dictionaries passed to the solver."""
    @staticmethod
    def GetEssential(dictionary, *arg):
        dictionary = {key.lower() if isinstance(key, str) else key: value for key, value in dictionary.items()}
        for keyword in arg:
            keyword_lower = keyword.lower() if isinstance(keyword, str) else keyword
            if keyword_lower in dictionary: 
                return dictionary[keyword_lower]
        raise KeyError(f"KeyError: {arg} is not included in the data dictionary!")
    
    @staticmethod
    def GetAlternative(dictionary, keyword, default):
        dictionary = {key.lower() if isinstance(key, str) else key: value for key, value in dictionary.items()}
        keyword_lower = keyword.lower() if isinstance(keyword, str) else keyword
        if keyword_lower in dictionary:
            return dictionary[keyword_lower]
        return default

    @staticmethod
    def GetOptional(dictionary, keyword):
        return DictIO.GetAlternative(dictionary, keyword, None)


def read_dict_list(dict_list, func, **kwargs):
    if isinstance(dict_list, dict):
        func(dict_list, **kwargs)
    elif isinstance(dict_list, (list, tuple)):
        for dictionary in dict_list:
            func(dictionary, **kwargs)
    else:
        raise TypeError(f"Expected a dictionary or a list of dictionaries, got {type(dict_list).__name__}")
