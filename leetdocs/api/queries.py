"""
GraphQL documents sent to the LeetCode China endpoint.
"""

QUESTION_DATA = """
query questionData($titleSlug: String!) {
    question(titleSlug: $titleSlug) {
        questionId
        questionFrontendId
        title
        titleSlug
        content
        translatedTitle
        translatedContent
        isPaidOnly
        difficulty
        likes
        dislikes
        similarQuestions
        topicTags {
            name
            slug
            translatedName
            __typename
        }
        codeSnippets {
            lang
            langSlug
            code
            __typename
        }
        stats
        hints
        status
        sampleTestCase
        metaData
        __typename
    }
}
"""

QUESTION_TRANSLATIONS = """
query getQuestionTranslation($lang: String) {
    translations: allAppliedQuestionTranslations(lang: $lang) {
        title
        questionId
        __typename
    }
}
"""

QUESTION_STATUSES = """
query allQuestionsStatuses {
    allQuestions {
        ...questionStatusFields
        __typename
    }
}
fragment questionStatusFields on QuestionNode {
    questionId
    status
    __typename
}
"""

GLOBAL_DATA = """
query globalData {
    userStatus {
        isSignedIn
        isPremium
        isVerified
        username
        realName
        userSlug
        avatar
        useTranslation
        __typename
    }
    siteRegion
    chinaHost
}
"""
