"""Votes on content, polls attached to posts, and poll ballots."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import Poll, PollCreate, PollUpdate, PollVote, PollVoteCreate, Vote, VoteCreate, VoteUpdate

create_vote = Operation("votes", "create", "POST", "/discussionBoard/member/votes", VoteCreate, Vote)
at_vote = Operation("votes", "at", "GET", "/discussionBoard/member/votes/{voteId}", None, Vote)
update_vote = Operation("votes", "update", "PUT", "/discussionBoard/member/votes/{voteId}", VoteUpdate, Vote)
erase_vote = Operation("votes", "erase", "DELETE", "/discussionBoard/member/votes/{voteId}")

create_poll = Operation("polls", "create", "POST", "/discussionBoard/member/posts/{postId}/polls", PollCreate, Poll)
at_poll = Operation("polls", "at", "GET", "/discussionBoard/posts/{postId}/polls/{pollId}", None, Poll)
update_poll = Operation("polls", "update", "PUT", "/discussionBoard/member/posts/{postId}/polls/{pollId}", PollUpdate, Poll)
erase_poll = Operation("polls", "erase", "DELETE", "/discussionBoard/member/posts/{postId}/polls/{pollId}")

create_poll_vote = Operation(
    "poll_votes", "create", "POST", "/discussionBoard/member/polls/{pollId}/pollVotes", PollVoteCreate, PollVote
)
at_poll_vote = Operation(
    "poll_votes", "at", "GET", "/discussionBoard/member/polls/{pollId}/pollVotes/{pollVoteId}", None, PollVote
)
erase_poll_vote = Operation("poll_votes", "erase", "DELETE", "/discussionBoard/member/polls/{pollId}/pollVotes/{pollVoteId}")
